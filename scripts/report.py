"""
Print a summary report of the movie dataset.

This script:
1) Loads movies from data/imdb_top_1000.csv (or the path given as first argument)
2) Runs the counting queries
3) Runs the ranking queries
4) Runs a sample filtered search

Usage:
    poetry run python -m scripts.report [path/to/movies.csv]
"""

import sys
import time  # measure step timings
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from movie_analyzer.analyzer import MovieAnalyzer  # query API
from movie_analyzer.models import MovieSortKey, StarSortKey  # ranking keys

TOP_K = 10  # size of each ranking in the report


def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Movie Dataset Report")
	logger.info("=" * 60)

	root = Path(__file__).resolve().parents[1]  # project root
	data_path = Path(argv[0]) if argv else root / 'data' / 'imdb_top_1000.csv'  # input dataset

	# 1) Load data
	logger.info("[1/4] Loading movies...")
	t0 = time.time()  # start timer
	analyzer = MovieAnalyzer.from_csv(str(data_path))
	logger.info(f"[OK] Loaded {len(analyzer)} movies in {time.time() - t0:.2f}s")

	# 2) Counts
	logger.info("\n[2/4] Counts")
	for year, count in list(analyzer.count_by_year().items())[:TOP_K]:
		logger.info(f"  {year}: {count}")
	for genre, count in analyzer.count_by_genre().items():
		logger.info(f"  {genre}: {count}")
	for (first, second), count in list(analyzer.co_star_count().items())[:TOP_K]:
		logger.info(f"  {first} & {second}: {count}")

	# 3) Rankings, capped at what the dataset can provide
	logger.info("\n[3/4] Rankings")
	top_k = min(TOP_K, len(analyzer))
	for key in MovieSortKey:
		logger.info(f"  Top movies by {key.value}: {analyzer.top_movies(top_k, key)}")
	for key in StarSortKey:
		try:
			logger.info(f"  Top stars by {key.value}: {analyzer.top_stars(top_k, key)}")
		except IndexError as e:
			logger.warning(f"  Top stars by {key.value} skipped: {e}")

	# 4) Sample search
	logger.info("\n[4/4] Search: Drama, rating >= 8.0, runtime <= 150")
	titles = analyzer.search_movies('Drama', 8.0, 150)
	logger.info(f"[OK] {len(titles)} matches; first {TOP_K}: {titles[:TOP_K]}")

	logger.info("=" * 60)


if __name__ == '__main__':
	main()  # invoke report
