"""
Dog breed lookup system.

Looks up the sub-breeds of a dog breed through a pluggable fetcher, with a
caching decorator that remembers successful lookups.
"""

from .caching import CachingBreedFetcher
from .exceptions import (
    BreedFetcherError,
    BreedLookupError,
    BreedNotFoundError,
    InvalidArgumentError,
)
from .interfaces import FetcherStats, IBreedFetcher
from .services import DogApiBreedFetcher, LocalBreedFetcher

__version__ = "1.0.0"

__all__ = [
    "CachingBreedFetcher",
    "DogApiBreedFetcher",
    "LocalBreedFetcher",
    "IBreedFetcher",
    "FetcherStats",
    "BreedLookupError",
    "BreedNotFoundError",
    "BreedFetcherError",
    "InvalidArgumentError",
]
