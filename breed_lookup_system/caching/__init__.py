"""
Caching layer for breed lookups.
"""

from .caching_fetcher import CachingBreedFetcher

__all__ = [
    "CachingBreedFetcher",
]
