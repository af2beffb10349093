"""
Streamlit dashboard for the Movie Analyzer.
Calls the local FastAPI server at http://localhost:8000 to fetch query results,
or runs locally by loading the CSV dataset like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local analyzer imports for fallback/local mode (when API isn't used)
from movie_analyzer.analyzer import MovieAnalyzer  # counting + ranking queries
from movie_analyzer.models import MovieSortKey, StarSortKey  # sort key choices

# Default URL where the FastAPI server is expected to run locally
DEFAULT_API_URL = "http://localhost:8000"  # default API base URL
DEFAULT_DATASET_PATH = "data/imdb_top_1000.csv"  # dataset used in local mode

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Analyzer", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Analyzer – IMDB Top Movies at a Glance")  # friendly header


# Cache the local analyzer so we only parse the CSV once per session
@st.cache_resource(show_spinner=True)
def init_local_analyzer(dataset_path: str) -> Optional[MovieAnalyzer]:
	"""Create a local MovieAnalyzer from the CSV dataset."""
	try:
		return MovieAnalyzer.from_csv(dataset_path)  # success
	except (OSError, ValueError) as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to load dataset for local mode: {e}")
		return None  # signal failure


def query_local(analyzer: MovieAnalyzer, path: str, params: dict):
	"""Run a query in-process and shape the result like the API response."""
	if path == "/genres":
		return analyzer.genres()
	if path == "/movies/count-by-year":
		return [{"year": y, "count": c} for y, c in analyzer.count_by_year().items()]
	if path == "/genres/count":
		return [{"genre": g, "count": c} for g, c in analyzer.count_by_genre().items()]
	if path == "/co-stars":
		pairs = list(analyzer.co_star_count().items())[:params["limit"]]
		return [{"stars": list(p), "count": c} for p, c in pairs]
	if path == "/movies/top":
		return {"titles": analyzer.top_movies(params["top_k"], params["by"])}
	if path == "/stars/top":
		return {"stars": analyzer.top_stars(params["top_k"], params["by"])}
	if path == "/movies/search":
		return {"titles": analyzer.search_movies(params["genre"], params["min_rating"], params["max_runtime"])}
	raise ValueError(f"Unknown query path: {path}")


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	top_k = st.slider("Top K", min_value=5, max_value=50, value=10)  # ranking size
	api_url = st.text_input("API URL", DEFAULT_API_URL)  # where the API lives
	dataset_path = st.text_input("Dataset (local mode)", DEFAULT_DATASET_PATH)  # CSV location
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local analyzer", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok and h.json().get("analyzer_ready", False)  # True if server is ready
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local analyzer.")  # inform user

# Initialize local analyzer only when needed (user toggle or API not available)
local_analyzer: Optional[MovieAnalyzer] = None  # placeholder
if use_local or not api_available:
	local_analyzer = init_local_analyzer(dataset_path)
	if local_analyzer is not None:
		st.sidebar.success(f"Local analyzer ready ({len(local_analyzer)} movies).")  # success note


def run_query(path: str, **params):
	"""
	Dispatch a query to the local analyzer or the API.
	Failures are shown inline and give None, so one failed query leaves the rest of the page intact.
	"""
	try:
		if local_analyzer is not None:
			return query_local(local_analyzer, path, params)
		resp = requests.get(f"{api_url}{path}", params=params, timeout=60)
		resp.raise_for_status()  # raise error if server responded with an error code
		return resp.json()
	except requests.RequestException as e:  # network/API errors, including 400 for oversized top_k
		st.error(f"API request to {path} failed: {e}")
	except IndexError as e:  # top_k beyond the dataset in local mode
		st.error(f"Query {path} failed: {e}")
	return None


counts_tab, rankings_tab, search_tab = st.tabs(["Counts", "Rankings", "Search"])

with counts_tab:
	col1, col2 = st.columns(2)
	with col1:
		st.subheader("Movies per year")
		by_year = run_query("/movies/count-by-year")
		if by_year is not None:
			st.bar_chart(by_year, x="year", y="count")
	with col2:
		st.subheader("Movies per genre")
		by_genre = run_query("/genres/count")
		if by_genre is not None:
			st.dataframe(by_genre, hide_index=True)
	st.subheader("Frequent co-stars")
	for row in run_query("/co-stars", limit=top_k) or []:
		st.write(f"{row['stars'][0]} & {row['stars'][1]}: {row['count']} movies")

with rankings_tab:
	col1, col2 = st.columns(2)
	with col1:
		movie_key = st.radio("Rank movies by", [k.value for k in MovieSortKey], horizontal=True)
		top = run_query("/movies/top", top_k=top_k, by=movie_key)
		for i, title in enumerate(top["titles"] if top else [], start=1):
			st.write(f"{i}. {title}")
	with col2:
		star_key = st.radio("Rank stars by", [k.value for k in StarSortKey], horizontal=True)
		top = run_query("/stars/top", top_k=top_k, by=star_key)
		for i, star in enumerate(top["stars"] if top else [], start=1):
			st.write(f"{i}. {star}")

with search_tab:
	genre_options = run_query("/genres") or []
	# Search matches genre names exactly, so offer only the names in the dataset
	genre = st.selectbox(
		"Genre",
		genre_options,
		index=genre_options.index("Drama") if "Drama" in genre_options else 0,
	)
	min_rating = st.slider("Minimum rating", min_value=0.0, max_value=10.0, value=8.0, step=0.1)
	max_runtime = st.number_input("Maximum runtime (min)", min_value=1, value=150)
	if st.button("Search", type="primary") and genre:
		found = run_query("/movies/search", genre=genre, min_rating=min_rating, max_runtime=int(max_runtime))
		if found is not None:
			st.success(f"Found {len(found['titles'])} movies")
			for title in found["titles"]:
				st.write(title)

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_analyzer is not None:
	st.sidebar.caption("Mode: Local analyzer")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
