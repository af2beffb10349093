"""
Data loading module.
Reads the IMDB top-movies CSV export into immutable Movie records.
"""

# Standard libs for CSV parsing, typing, and paths
import csv  # quoted, comma-separated rows
from typing import Dict, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie, STARS_PER_MOVIE  # structured movie record

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading and type coercion of movie rows.
	Rows that cannot be coerced are skipped with a warning; the analyzer never sees them.
	"""

	# Header names of the columns we read (Poster_Link and any extras are ignored)
	TITLE_COLUMN = 'Series_Title'
	YEAR_COLUMN = 'Released_Year'
	CERTIFICATE_COLUMN = 'Certificate'
	RUNTIME_COLUMN = 'Runtime'
	GENRE_COLUMN = 'Genre'
	RATING_COLUMN = 'IMDB_Rating'
	OVERVIEW_COLUMN = 'Overview'
	META_SCORE_COLUMN = 'Meta_score'
	DIRECTOR_COLUMN = 'Director'
	STAR_COLUMNS = tuple(f'Star{i}' for i in range(1, STARS_PER_MOVIE + 1))
	VOTES_COLUMN = 'No_of_Votes'
	GROSS_COLUMN = 'Gross'

	REQUIRED_COLUMNS = (
		TITLE_COLUMN, YEAR_COLUMN, CERTIFICATE_COLUMN, RUNTIME_COLUMN, GENRE_COLUMN,
		RATING_COLUMN, OVERVIEW_COLUMN, META_SCORE_COLUMN, DIRECTOR_COLUMN,
		*STAR_COLUMNS, VOTES_COLUMN, GROSS_COLUMN,
	)

	def load_movies_from_csv(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a CSV file whose first row is the header.
		Returns the valid rows as Movie objects, in file order.
		"""
		movies = []  # accumulator for parsed Movie objects
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		with open(filepath, 'r', encoding='utf-8', newline='') as f:
			reader = csv.DictReader(f)  # header row gives the field names
			missing = [c for c in self.REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
			if missing:
				raise ValueError(f"Movie data file {filepath} is missing columns: {missing}")

			# Data starts on line 2, after the header
			for line_num, row in enumerate(reader, 2):
				try:
					movies.append(self._parse_row(row))  # convert dict -> Movie
				except ValueError as e:
					logger.warning(f"[DataLoader] Skipping malformed row at line {line_num}: {e}")  # bad row
					continue  # move on

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies  # return list

	def _parse_row(self, row: Dict[str, str]) -> Movie:
		"""
		Convert one CSV row into a Movie.
		Raises ValueError when a required field is missing or not numeric.
		"""
		title = self._clean_text(row.get(self.TITLE_COLUMN))
		if not title:
			raise ValueError("empty title")

		genres = self._parse_comma_separated(row.get(self.GENRE_COLUMN))
		if not genres:
			raise ValueError(f"no genres for '{title}'")

		return Movie(
			title=title,
			released_year=int(self._clean_text(row.get(self.YEAR_COLUMN))),
			certificate=self._clean_text(row.get(self.CERTIFICATE_COLUMN)),
			runtime=self._parse_runtime(row.get(self.RUNTIME_COLUMN)),
			genres=genres,
			imdb_rating=float(self._clean_text(row.get(self.RATING_COLUMN))),
			overview=self._clean_text(row.get(self.OVERVIEW_COLUMN)),
			meta_score=self._parse_optional_int(row.get(self.META_SCORE_COLUMN)),
			director=self._clean_text(row.get(self.DIRECTOR_COLUMN)),
			stars=[self._clean_text(row.get(c)) for c in self.STAR_COLUMNS],  # fixed arity
			no_of_votes=int(self._strip_separators(row.get(self.VOTES_COLUMN))),
			gross=self._parse_optional_int(row.get(self.GROSS_COLUMN)),
		)

	def _clean_text(self, value: Optional[str]) -> str:
		"""Trim whitespace; None becomes an empty string."""
		if not value:
			return ''
		return value.strip()

	def _strip_separators(self, value: Optional[str]) -> str:
		"""Drop thousands separators and stray quotes from a numeric field."""
		return self._clean_text(value).replace(',', '').replace('"', '')

	def _parse_runtime(self, value: Optional[str]) -> int:
		"""'142 min' -> 142"""
		return int(self._clean_text(value).replace(' min', ''))

	def _parse_optional_int(self, value: Optional[str]) -> Optional[int]:
		"""
		Parse a nullable numeric field: empty means absent, not zero.
		Some exports write whole numbers as '80.0'; any other fraction is malformed.
		"""
		text = self._strip_separators(value)
		if not text:
			return None
		if '.' not in text:
			return int(text)
		number = float(text)
		if not number.is_integer():
			raise ValueError(f"expected a whole number, got '{text}'")
		return int(number)

	def _parse_comma_separated(self, value: Optional[str]) -> List[str]:
		"""Split 'Crime, Drama' into ['Crime', 'Drama'], keeping source order."""
		if not value:
			return []
		return [item.strip() for item in value.split(',') if item.strip()]
