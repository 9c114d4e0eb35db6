"""
Caching Breed Fetcher

Wraps another IBreedFetcher and memoizes successful lookups so repeated
requests for the same breed never reach the underlying source twice.

- Keys are case-insensitive ("Hound" and "hound" share one entry)
- Failed lookups are never cached, so a missing breed is asked for again
- Every list handed out is a fresh copy of the cached one
"""

import logging
from typing import Dict, List, Optional

from ..exceptions import BreedNotFoundError, InvalidArgumentError
from ..interfaces.fetcher import FetcherStats, IBreedFetcher

logger = logging.getLogger(__name__)


class CachingBreedFetcher(IBreedFetcher):
    """
    Caching decorator around a breed fetcher

    Flow:
    1. Normalize the breed name into a cache key
    2. On a hit, return a copy of the cached sub-breeds
    3. On a miss, count the call and ask the delegate
    4. Cache successful results (including empty lists), never failures

    Not thread-safe: callers sharing an instance across threads must guard
    get_sub_breeds and get_calls_made with a single lock.
    """

    def __init__(self, fetcher: IBreedFetcher):
        """
        Initialize caching fetcher

        Args:
            fetcher: Underlying fetcher to delegate misses to

        Raises:
            InvalidArgumentError: If fetcher is None
        """
        if fetcher is None:
            raise InvalidArgumentError("delegate fetcher must not be None")

        # Private: delegate and breed -> sub-breeds map
        self.__delegate = fetcher
        self.__cache: Dict[str, List[str]] = {}

        # Private: Statistics
        self.__calls_made = 0
        self.__hits = 0

    def get_sub_breeds(self, breed: Optional[str]) -> List[str]:
        """
        Get sub-breeds, serving from cache when possible (Public API)

        A None breed is always forwarded to the delegate and never cached.

        Args:
            breed: Breed name, passed to the delegate unchanged on a miss

        Returns:
            List of sub-breed names owned by the caller

        Raises:
            BreedNotFoundError: If the delegate does not know the breed
        """
        key = self._make_key(breed)

        if key is not None and key in self.__cache:
            self.__hits += 1
            logger.debug(f"Cache hit for breed '{breed}'")
            return list(self.__cache[key])

        # Cache miss - this counts as a call whether or not it succeeds
        self.__calls_made += 1
        logger.debug(f"Cache miss for breed '{breed}', calling delegate")
        try:
            result = self.__delegate.get_sub_breeds(breed)
        except BreedNotFoundError:
            logger.debug(f"Breed '{breed}' not found, nothing cached")
            raise
        except Exception as e:
            logger.debug(f"Delegate failed for breed '{breed}' ({type(e).__name__}), nothing cached")
            raise

        if key is None:
            return result

        self.__cache[key] = list(result)
        return list(result)

    def get_calls_made(self) -> int:
        """
        Get number of calls made to the delegate (Public API)

        Returns:
            Count of cache misses that reached the delegate
        """
        return self.__calls_made

    def get_stats(self) -> FetcherStats:
        """
        Get cache statistics (Public API)

        Returns:
            FetcherStats with hits, calls made, size and hit_rate
        """
        return FetcherStats(
            hits=self.__hits,
            calls_made=self.__calls_made,
            size=len(self.__cache),
        )

    def _make_key(self, breed: Optional[str]) -> Optional[str]:
        """Create cache key from breed name (lowercase, None stays None)"""
        if breed is None:
            return None
        return breed.lower()
