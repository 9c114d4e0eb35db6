"""
Tests for LocalBreedFetcher.
"""

import pytest

from breed_lookup_system.exceptions import BreedNotFoundError
from breed_lookup_system.services.local_fetcher import LocalBreedFetcher


def test_default_data_knows_hound():
    fetcher = LocalBreedFetcher()
    assert "afghan" in fetcher.get_sub_breeds("hound")


def test_lookup_is_case_insensitive():
    fetcher = LocalBreedFetcher({"Hound": ["plott"]})
    assert fetcher.get_sub_breeds("HOUND") == ["plott"]


@pytest.mark.parametrize("breed", ["cat", None, ""])
def test_unknown_breed_raises(breed):
    with pytest.raises(BreedNotFoundError):
        LocalBreedFetcher().get_sub_breeds(breed)


def test_returns_fresh_lists():
    fetcher = LocalBreedFetcher({"hound": ["plott"]})
    fetcher.get_sub_breeds("hound").append("mutated")
    assert fetcher.get_sub_breeds("hound") == ["plott"]


def test_counts_every_call():
    fetcher = LocalBreedFetcher()
    fetcher.get_sub_breeds("hound")
    with pytest.raises(BreedNotFoundError):
        fetcher.get_sub_breeds("cat")
    assert fetcher.get_call_count() == 2
