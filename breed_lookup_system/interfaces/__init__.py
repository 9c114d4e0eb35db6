"""
Core interface abstractions.

Fetchers depend on this contract rather than on each other, which keeps the
cache decoupled from any concrete data source.
"""

from .fetcher import IBreedFetcher, FetcherStats

__all__ = [
    "IBreedFetcher",
    "FetcherStats",
]
