"""
Shared fixtures for breed lookup tests.
"""

from typing import Dict, List, Optional

import pytest

from breed_lookup_system.exceptions import BreedNotFoundError
from breed_lookup_system.interfaces.fetcher import IBreedFetcher


class RecordingFetcher(IBreedFetcher):
    """Fetcher that records every breed it is asked for."""

    def __init__(self, breeds: Dict[str, List[str]], error: Optional[Exception] = None):
        self.breeds = breeds
        self.error = error
        self.requests: List[Optional[str]] = []
        self.returned: List[List[str]] = []

    def get_sub_breeds(self, breed: Optional[str]) -> List[str]:
        self.requests.append(breed)
        if self.error is not None:
            raise self.error
        key = breed.lower() if breed is not None else None
        if key not in self.breeds:
            raise BreedNotFoundError(breed)
        result = list(self.breeds[key])
        self.returned.append(result)
        return result


@pytest.fixture
def recording_fetcher():
    """Fetcher knowing hound, pug (no sub-breeds) and the None breed."""
    return RecordingFetcher({
        "hound": ["afghan", "basset"],
        "pug": [],
        None: ["anonymous"],
    })


@pytest.fixture
def fetcher_factory():
    """Build a RecordingFetcher over custom data."""
    return RecordingFetcher
