"""
In-memory breed fetcher for local runs and tests.
"""

from typing import Dict, List, Optional

from ..exceptions import BreedNotFoundError
from ..interfaces.fetcher import IBreedFetcher

DEFAULT_BREEDS: Dict[str, List[str]] = {
    "hound": ["afghan", "basset", "blood", "english", "ibizan", "plott", "walker"],
}


class LocalBreedFetcher(IBreedFetcher):
    """Breed fetcher over a fixed breed -> sub-breeds mapping"""

    def __init__(self, breeds: Optional[Dict[str, List[str]]] = None):
        data = DEFAULT_BREEDS if breeds is None else breeds
        self.__breeds = {name.lower(): list(subs) for name, subs in data.items()}
        self.__call_count = 0

    def get_sub_breeds(self, breed: Optional[str]) -> List[str]:
        self.__call_count += 1
        if breed is None or breed.lower() not in self.__breeds:
            raise BreedNotFoundError(breed)
        return list(self.__breeds[breed.lower()])

    def get_call_count(self) -> int:
        """Number of lookups served, found or not"""
        return self.__call_count
