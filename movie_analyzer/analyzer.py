"""
Analyzer module.
Answers counting, ranking, and filtered-search queries over a loaded movie collection.
"""

from collections import Counter, defaultdict  # grouping helpers
from typing import Dict, List, Optional, Sequence, Type, TypeVar, Union  # type annotations

# Import project modules for data structures and loading
from .models import CoStarPair, Movie, MovieSortKey, StarSortKey, star_pairs  # core data classes
from .data_loader import DataLoader  # CSV ingestion

# Import loguru for console logging
from loguru import logger  # simple structured logger


SortKey = TypeVar('SortKey', MovieSortKey, StarSortKey)


class MovieAnalyzer:
	"""
	Read-only query API over an ordered collection of movies.
	The collection is copied into a tuple at construction and never changes afterwards,
	so every query is a pure function of the rows handed in by the loader.
	"""

	def __init__(self, movies: Sequence[Movie]):
		self._movies = tuple(movies)  # source row order is preserved
		logger.info(f"[Analyzer] Ready with {len(self._movies)} movies")

	@classmethod
	def from_csv(cls, filepath: str) -> 'MovieAnalyzer':
		"""Load a dataset file with DataLoader and build an analyzer over it."""
		return cls(DataLoader().load_movies_from_csv(filepath))

	@property
	def movies(self) -> Sequence[Movie]:
		return self._movies

	def __len__(self) -> int:
		return len(self._movies)

	def genres(self) -> List[str]:
		"""Every genre that appears in the dataset, A-Z. Valid inputs for search_movies."""
		return sorted({genre for m in self._movies for genre in m.genres})

	def count_by_year(self) -> Dict[int, int]:
		"""Number of movies per release year, newest year first."""
		counts = Counter(m.released_year for m in self._movies)
		return {year: counts[year] for year in sorted(counts, reverse=True)}

	def count_by_genre(self) -> Dict[str, int]:
		"""
		Number of movies per genre. A movie listed under several genres counts once for each.
		Ordered by count descending, then genre name ascending.
		"""
		counts = Counter(genre for m in self._movies for genre in m.genres)
		ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
		return dict(ordered)

	def co_star_count(self) -> Dict[CoStarPair, int]:
		"""
		Number of movies each pair of stars appears in together.
		Keys are name-sorted 2-tuples. Ordered by count descending; equal counts keep the
		order in which the pair first appears in the dataset.
		"""
		counts: Dict[CoStarPair, int] = Counter()
		for movie in self._movies:
			for pair in star_pairs(movie.stars):
				counts[pair] += 1
		# sorted() is stable, so ties stay in first-appearance order
		ordered = sorted(counts.items(), key=lambda item: -item[1])
		logger.debug(f"[Analyzer] Counted {len(ordered)} co-star pairs")
		return dict(ordered)

	def top_movies(self, top_k: int, by: Union[MovieSortKey, str]) -> List[str]:
		"""
		Titles of the top_k movies by runtime or by overview length, ties broken by title.
		An unknown sort key yields an empty list; asking for more movies than exist raises IndexError.
		"""
		key = self._sort_key(MovieSortKey, by)
		if key is None:
			return []

		if key is MovieSortKey.RUNTIME:
			ranked = sorted(self._movies, key=lambda m: (-m.runtime, m.title))
		else:
			ranked = sorted(self._movies, key=lambda m: (-len(m.overview), m.title))

		titles = [m.title for m in self._take(ranked, top_k, 'movies')]
		logger.debug(f"[Analyzer] top_movies by={key.value} top_k={top_k} -> {titles}")
		return titles

	def top_stars(self, top_k: int, by: Union[StarSortKey, str]) -> List[str]:
		"""
		Names of the top_k stars by average rating or average gross, ties broken by name.

		Averages are taken over every movie the star appears in. For gross, movies without a
		gross figure are left out of both the sum and the count, and a star with no grossing
		movie is not ranked at all. The gross average uses integer division.
		"""
		key = self._sort_key(StarSortKey, by)
		if key is None:
			return []

		totals = defaultdict(int)  # star -> summed rating or gross
		counts = defaultdict(int)  # star -> number of contributing movies
		for movie in self._movies:
			value = movie.imdb_rating if key is StarSortKey.RATING else movie.gross
			if value is None:  # nullable gross never counts as zero
				continue
			for star in movie.stars:
				totals[star] += value
				counts[star] += 1

		if key is StarSortKey.RATING:
			averages = {star: totals[star] / counts[star] for star in totals}
		else:
			averages = {star: totals[star] // counts[star] for star in totals}

		ranked = sorted(averages.items(), key=lambda item: (-item[1], item[0]))
		names = [star for star, _ in self._take(ranked, top_k, 'eligible stars')]
		logger.debug(f"[Analyzer] top_stars by={key.value} top_k={top_k} -> {names}")
		return names

	def search_movies(self, genre: str, min_rating: float, max_runtime: int) -> List[str]:
		"""Titles in the given genre rated at least min_rating and no longer than max_runtime, A-Z."""
		titles = [
			m.title
			for m in self._movies
			if genre in m.genres and m.imdb_rating >= min_rating and m.runtime <= max_runtime
		]
		titles.sort()
		logger.debug(
			f"[Analyzer] search_movies genre={genre} min_rating={min_rating} max_runtime={max_runtime} -> {len(titles)} matches"
		)
		return titles

	def _sort_key(self, enum_cls: Type[SortKey], by: Union[SortKey, str]) -> Optional[SortKey]:
		"""Map a raw sort key onto the enum; unknown keys are logged and give None."""
		try:
			return enum_cls(by)
		except ValueError:
			logger.warning(f"[Analyzer] Unknown sort key '{by}', expected one of {[k.value for k in enum_cls]}")
			return None

	@staticmethod
	def _take(ranked: list, top_k: int, what: str) -> list:
		"""First top_k ranked items; top_k beyond the available items is an IndexError."""
		if top_k > len(ranked):
			raise IndexError(f"Requested top {top_k} but only {len(ranked)} {what} are available")
		return ranked[:max(top_k, 0)]
