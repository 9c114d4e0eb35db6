"""
Concrete breed fetchers.
"""

from .dog_api_fetcher import DogApiBreedFetcher
from .local_fetcher import LocalBreedFetcher

__all__ = [
    "DogApiBreedFetcher",
    "LocalBreedFetcher",
]
