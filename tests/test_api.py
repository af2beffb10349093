"""API tests: endpoints served from an in-memory analyzer."""

import pytest
from fastapi.testclient import TestClient

import api
from movie_analyzer.analyzer import MovieAnalyzer


@pytest.fixture
def client(movies, monkeypatch):
	# No `with` block, so the startup hook (which reads the CSV) does not run
	monkeypatch.setattr(api, 'ANALYZER', MovieAnalyzer(movies))
	return TestClient(api.app)


def test_health(client):
	body = client.get('/health').json()
	assert body['status'] == 'ok'
	assert body['analyzer_ready'] is True
	assert body['movie_count'] == 5


def test_count_by_year(client):
	resp = client.get('/movies/count-by-year')
	assert resp.status_code == 200
	assert resp.json()[0] == {'year': 1995, 'count': 2}


def test_count_by_genre(client):
	body = client.get('/genres/count').json()
	assert [row['genre'] for row in body] == ['Drama', 'Crime', 'Action', 'Mystery']


def test_co_stars_limit(client):
	body = client.get('/co-stars', params={'limit': 2}).json()
	assert body == [
		{'stars': ['Al Pacino', 'Diane Keaton'], 'count': 2},
		{'stars': ['Al Pacino', 'Robert De Niro'], 'count': 2},
	]


def test_top_movies(client):
	body = client.get('/movies/top', params={'top_k': 2, 'by': 'runtime'}).json()
	assert body == {'by': 'runtime', 'top_k': 2, 'titles': ['The Godfather: Part II', 'The Godfather']}


def test_top_movies_out_of_range(client):
	resp = client.get('/movies/top', params={'top_k': 50, 'by': 'overview'})
	assert resp.status_code == 400


def test_top_movies_unknown_key_rejected(client):
	resp = client.get('/movies/top', params={'top_k': 2, 'by': 'votes'})
	assert resp.status_code == 422


def test_top_stars(client):
	body = client.get('/stars/top', params={'top_k': 2, 'by': 'gross'}).json()
	assert body['stars'] == ['James Caan', 'Marlon Brando']


def test_search(client):
	body = client.get('/movies/search', params={'genre': 'Drama', 'min_rating': 8.0, 'max_runtime': 150}).json()
	assert body['titles'] == ['Se7en', 'The Shawshank Redemption']


def test_not_ready(monkeypatch):
	monkeypatch.setattr(api, 'ANALYZER', None)
	client = TestClient(api.app)
	assert client.get('/genres/count').status_code == 503
	assert client.get('/health').json()['analyzer_ready'] is False


def test_genres(client):
	assert client.get('/genres').json() == ['Action', 'Crime', 'Drama', 'Mystery']
