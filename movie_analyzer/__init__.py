"""
Movie Analyzer: counting, ranking and search queries over the IMDB top-movies dataset.
"""

from .models import Movie, MovieSortKey, StarSortKey  # record model
from .data_loader import DataLoader  # CSV ingestion
from .analyzer import MovieAnalyzer  # query API

__all__ = ['Movie', 'MovieSortKey', 'StarSortKey', 'DataLoader', 'MovieAnalyzer']
