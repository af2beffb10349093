"""Dashboard tests run headless through Streamlit's AppTest harness."""

from pathlib import Path

from streamlit.testing.v1 import AppTest


APP_PATH = str(Path(__file__).resolve().parents[1] / 'streamlit_app.py')

ROWS = [
	'x,Heat,1995,R,170 min,"Action, Crime, Drama",8.2,Bank robbers.,76,Michael Mann,'
	'Al Pacino,Robert De Niro,Val Kilmer,Jon Voight,577113,"67,436,818"',
	'x,Se7en,1995,A,127 min,"Crime, Drama, Mystery",8.6,Two detectives.,,David Fincher,'
	'Morgan Freeman,Brad Pitt,Kevin Spacey,Andrew Kevin Walker,1445096,',
]


def local_app(csv_path) -> AppTest:
	"""Run the dashboard once, then switch it to local mode over csv_path."""
	at = AppTest.from_file(APP_PATH, default_timeout=30)
	at.run()
	at.sidebar.text_input[1].set_value(str(csv_path))
	at.sidebar.toggle[0].set_value(True)
	return at.run()


def test_oversized_ranking_does_not_hide_search_tab(write_csv):
	# Two movies cannot fill the default Top K of 10
	at = local_app(write_csv(*ROWS))

	assert not at.exception
	assert any('/movies/top' in e.value for e in at.error)
	assert any('/stars/top' in e.value for e in at.error)
	# Search tab still renders after the failed rankings
	assert at.selectbox[0].options == ['Action', 'Crime', 'Drama', 'Mystery']
	assert at.selectbox[0].value == 'Drama'


def test_search_from_genre_picker(write_csv):
	at = local_app(write_csv(*ROWS))

	at.selectbox[0].set_value('Mystery')
	at.button[0].click()
	at.run()

	assert not at.exception
	assert 'Found 1 movies' in [s.value for s in at.success]
