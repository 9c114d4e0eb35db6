"""
Fetcher interface - contract for every source of sub-breed data.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel


class FetcherStats(BaseModel):
    """Statistics about a caching fetcher"""
    hits: int = 0
    calls_made: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        total = self.hits + self.calls_made
        return self.hits / total if total > 0 else 0.0


class IBreedFetcher(ABC):
    """
    Breed fetcher interface.

    Implementations map a breed name to its sub-breed names. The HTTP
    fetcher, the in-memory fetcher and the caching decorator all implement
    it, so they can be stacked and swapped freely.
    """

    @abstractmethod
    def get_sub_breeds(self, breed: Optional[str]) -> List[str]:
        """
        Look up the sub-breeds of a breed.

        Args:
            breed: Breed name (may be None; validity is up to the fetcher)

        Returns:
            List of sub-breed names, possibly empty

        Raises:
            BreedNotFoundError: If the breed does not exist
            BreedFetcherError: If the underlying source fails
        """
        pass
