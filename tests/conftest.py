"""Shared fixtures: small in-memory datasets and a CSV writer."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from movie_analyzer.models import Movie


CSV_HEADER = (
	'Poster_Link,Series_Title,Released_Year,Certificate,Runtime,Genre,IMDB_Rating,'
	'Overview,Meta_score,Director,Star1,Star2,Star3,Star4,No_of_Votes,Gross'
)


def build_movie(title, **overrides) -> Movie:
	"""Movie with sensible defaults; override only the fields a test cares about."""
	fields = dict(
		title=title,
		released_year=2000,
		certificate='PG',
		runtime=120,
		genres=['Drama'],
		imdb_rating=8.0,
		overview='',
		meta_score=None,
		director='Some Director',
		stars=[f'{title} Star{i}' for i in range(1, 5)],
		no_of_votes=1000,
		gross=None,
	)
	fields.update(overrides)
	return Movie(**fields)


@pytest.fixture
def make_movie():
	"""Factory for one-off movies inside a test."""
	return build_movie


@pytest.fixture
def movies():
	"""Five movies with shared stars, mixed genres and some missing gross values."""
	return [
		build_movie(
			'The Shawshank Redemption', released_year=1994, runtime=142, genres=['Drama'],
			imdb_rating=9.3, overview='Two imprisoned men bond over a number of years.',
			meta_score=80, director='Frank Darabont',
			stars=['Tim Robbins', 'Morgan Freeman', 'Bob Gunton', 'William Sadler'],
			no_of_votes=2343110, gross=28341469,
		),
		build_movie(
			'The Godfather', released_year=1972, runtime=175, genres=['Crime', 'Drama'],
			imdb_rating=9.2, overview='An organized crime dynasty\'s aging patriarch transfers control.',
			meta_score=100, director='Francis Ford Coppola',
			stars=['Marlon Brando', 'Al Pacino', 'James Caan', 'Diane Keaton'],
			no_of_votes=1620367, gross=134966411,
		),
		build_movie(
			'The Godfather: Part II', released_year=1974, runtime=202, genres=['Crime', 'Drama'],
			imdb_rating=9.0, overview='The early life of Vito Corleone.',
			meta_score=90, director='Francis Ford Coppola',
			stars=['Al Pacino', 'Robert De Niro', 'Robert Duvall', 'Diane Keaton'],
			no_of_votes=1129952, gross=57300000,
		),
		build_movie(
			'Se7en', released_year=1995, runtime=127, genres=['Crime', 'Drama', 'Mystery'],
			imdb_rating=8.6, overview='Two detectives hunt a serial killer.',
			meta_score=65, director='David Fincher',
			stars=['Morgan Freeman', 'Brad Pitt', 'Kevin Spacey', 'Andrew Kevin Walker'],
			no_of_votes=1445096, gross=None,
		),
		build_movie(
			'Heat', released_year=1995, runtime=170, genres=['Action', 'Crime', 'Drama'],
			imdb_rating=8.2, overview='A group of professional bank robbers.',
			meta_score=76, director='Michael Mann',
			stars=['Al Pacino', 'Robert De Niro', 'Val Kilmer', 'Jon Voight'],
			no_of_votes=577113, gross=67436818,
		),
	]


@pytest.fixture
def write_csv(tmp_path):
	"""Write header + rows to a temporary CSV file and return its path."""
	def _write(*rows, header=CSV_HEADER):
		path = tmp_path / 'movies.csv'
		path.write_text('\n'.join([header, *rows]) + '\n', encoding='utf-8')
		return path
	return _write
