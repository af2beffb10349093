"""
Data models for the Movie Analyzer.
Defines the movie record and the sort keys accepted by the ranking queries.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass  # auto-generates __init__, __repr__, etc.
# Enum gives the ranking queries a closed set of sort keys
from enum import Enum  # closed enumerations
# Import typing helpers for precise and self-documenting types
from typing import Optional, Sequence, Tuple  # optional values and fixed-size tuples


# Number of cast members listed per movie in the dataset (Star1..Star4)
STARS_PER_MOVIE = 4

# Unordered pair of stars, stored with its two names already sorted
CoStarPair = Tuple[str, str]


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single row of the movie dataset.
	Frozen so that a loaded collection cannot be changed behind the analyzer's back.
	"""
	title: str  # series title as shown in the dataset
	released_year: int  # release year (e.g., 1994)
	certificate: str  # age certificate, may be empty
	runtime: int  # runtime in minutes
	genres: Tuple[str, ...]  # genre names in source order, never empty
	imdb_rating: float  # IMDB rating on a 0-10 scale
	overview: str  # short synopsis, may be empty
	meta_score: Optional[int]  # metacritic score, None when the source field is empty
	director: str  # director's name
	stars: Tuple[str, ...]  # exactly four cast members, order as given
	no_of_votes: int  # number of IMDB votes
	gross: Optional[int]  # gross revenue, None when the source field is empty

	def __post_init__(self):
		# Accept any sequence for the multi-valued fields but store tuples
		object.__setattr__(self, 'genres', tuple(self.genres))
		object.__setattr__(self, 'stars', tuple(self.stars))


class MovieSortKey(str, Enum):
	"""Orderings supported by MovieAnalyzer.top_movies."""
	RUNTIME = 'runtime'  # longest movies first
	OVERVIEW = 'overview'  # longest overview text first


class StarSortKey(str, Enum):
	"""Orderings supported by MovieAnalyzer.top_stars."""
	RATING = 'rating'  # highest average IMDB rating first
	GROSS = 'gross'  # highest average gross first


def make_pair(first: str, second: str) -> CoStarPair:
	"""Build an order-independent co-star key."""
	return (first, second) if first <= second else (second, first)


def star_pairs(stars: Sequence[str]):
	"""Yield every unordered pair among a movie's stars (C(4,2) = 6 for a full cast)."""
	for i in range(len(stars) - 1):
		for j in range(i + 1, len(stars)):
			yield make_pair(stars[i], stars[j])
