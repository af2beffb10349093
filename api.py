"""
FastAPI server exposing the movie analysis queries.
Endpoints:
- GET /health: basic health check
- GET /genres: genre names accepted by /movies/search
- GET /movies/count-by-year, /genres/count, /co-stars: aggregate counts
- GET /movies/top, /stars/top: top-K rankings
- GET /movies/search?genre=...&min_rating=...&max_runtime=...: filtered search

Startup loads the dataset named by MOVIE_DATASET_PATH (default data/imdb_top_1000.csv).
"""

# Import standard libraries for environment settings and timing
import os  # env-based settings
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for data loading and analysis
from movie_analyzer.analyzer import MovieAnalyzer  # query engine
from movie_analyzer.models import MovieSortKey, StarSortKey  # accepted sort keys

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Default dataset location, overridable from the environment
DEFAULT_DATASET_PATH = 'data/imdb_top_1000.csv'

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Analyzer API", version="1.0.0")  # web app

# Globals that hold the analyzer instance and measured startup time
ANALYZER: Optional[MovieAnalyzer] = None  # will point to the initialized analyzer
STARTUP_TIME_S: float = 0.0  # measures how long startup took


class YearCount(BaseModel):
	year: int
	count: int


class GenreCount(BaseModel):
	genre: str
	count: int


class CoStarCount(BaseModel):
	stars: List[str]  # the two names, alphabetical
	count: int  # movies they share


class TopMoviesResponse(BaseModel):
	by: MovieSortKey
	top_k: int
	titles: List[str]


class TopStarsResponse(BaseModel):
	by: StarSortKey
	top_k: int
	stars: List[str]


class SearchResponse(BaseModel):
	genre: str
	min_rating: float
	max_runtime: int
	elapsed_ms: float  # server-side search time in ms
	titles: List[str]  # matching titles, A-Z


# FastAPI startup hook to initialize the analyzer once
@app.on_event("startup")
async def startup_event():
	"""Load the dataset and build the analyzer."""
	global ANALYZER, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	dataset_path = os.getenv('MOVIE_DATASET_PATH', DEFAULT_DATASET_PATH)  # configurable source
	logger.info(f"[API] Startup: loading movies from {dataset_path}...")  # log intent

	ANALYZER = MovieAnalyzer.from_csv(dataset_path)  # load + build

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(ANALYZER)} movies.")  # summary log


def _require_analyzer() -> MovieAnalyzer:
	"""Return the analyzer or answer 503 while it is not loaded."""
	if ANALYZER is None:
		logger.warning("[API] Query requested but analyzer not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Analyzer not initialized")
	return ANALYZER


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"analyzer_ready": ANALYZER is not None,  # True if analyzer initialized
		"movie_count": len(ANALYZER) if ANALYZER is not None else 0,  # dataset size
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies/count-by-year", response_model=List[YearCount])
async def count_by_year():
	"""Movie counts per release year, newest first."""
	counts = _require_analyzer().count_by_year()
	return [YearCount(year=year, count=count) for year, count in counts.items()]


@app.get("/genres", response_model=List[str])
async def genres():
	"""Genre names present in the dataset, A-Z."""
	return _require_analyzer().genres()


@app.get("/genres/count", response_model=List[GenreCount])
async def count_by_genre():
	"""Movie counts per genre, most common first."""
	counts = _require_analyzer().count_by_genre()
	return [GenreCount(genre=genre, count=count) for genre, count in counts.items()]


@app.get("/co-stars", response_model=List[CoStarCount])
async def co_stars(limit: int = Query(20, ge=1, description="Number of pairs to return")):
	"""Most frequent co-star pairs."""
	counts = _require_analyzer().co_star_count()
	items = list(counts.items())[:limit]  # already ordered by count
	return [CoStarCount(stars=list(pair), count=count) for pair, count in items]


@app.get("/movies/top", response_model=TopMoviesResponse)
async def top_movies(top_k: int = Query(10, ge=1), by: MovieSortKey = MovieSortKey.RUNTIME):
	"""Top-K movie titles by runtime or overview length."""
	try:
		titles = _require_analyzer().top_movies(top_k, by)
	except IndexError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return TopMoviesResponse(by=by, top_k=top_k, titles=titles)


@app.get("/stars/top", response_model=TopStarsResponse)
async def top_stars(top_k: int = Query(10, ge=1), by: StarSortKey = StarSortKey.RATING):
	"""Top-K stars by average rating or average gross."""
	try:
		stars = _require_analyzer().top_stars(top_k, by)
	except IndexError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return TopStarsResponse(by=by, top_k=top_k, stars=stars)


@app.get("/movies/search", response_model=SearchResponse)
async def search(
	genre: str = Query(..., description="Exact genre name, e.g. Drama"),
	min_rating: float = Query(0.0, description="Minimum IMDB rating"),
	max_runtime: int = Query(10_000, description="Maximum runtime in minutes"),
):
	"""Filter movies by genre, minimum rating and maximum runtime."""
	analyzer = _require_analyzer()

	# Time the search for latency insight
	start = time.time()  # start timer
	logger.debug(f"[API] /movies/search genre='{genre}' min_rating={min_rating} max_runtime={max_runtime}")

	titles = analyzer.search_movies(genre, min_rating, max_runtime)  # run search
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /movies/search served {len(titles)} titles in {elapsed_ms:.2f} ms")  # summary

	return SearchResponse(
		genre=genre,
		min_rating=min_rating,
		max_runtime=max_runtime,
		elapsed_ms=round(elapsed_ms, 2),
		titles=titles,
	)
