"""
Command-line entry point for breed lookups.

Usage:
    breed-lookup hound
    breed-lookup hound Hound HOUND --repeat 3
    breed-lookup hound cat --local --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import List, Optional

from .caching import CachingBreedFetcher
from .config import settings
from .exceptions import BreedFetcherError, BreedNotFoundError
from .interfaces.fetcher import IBreedFetcher
from .services.dog_api_fetcher import DogApiBreedFetcher
from .services.local_fetcher import LocalBreedFetcher

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_number_of_sub_breeds(breed: Optional[str], fetcher: IBreedFetcher) -> int:
    """
    Count the sub-breeds of a breed.

    Args:
        breed: Breed name
        fetcher: Fetcher to ask

    Returns:
        Number of sub-breeds, or 0 if the breed does not exist
    """
    try:
        return len(fetcher.get_sub_breeds(breed))
    except BreedNotFoundError:
        return 0


def build_parser() -> argparse.ArgumentParser:
    default_level = "DEBUG" if settings.debug else settings.log_level.upper()
    parser = argparse.ArgumentParser(
        prog="breed-lookup",
        description=f"{settings.app_name}: look up dog sub-breeds through a caching fetcher"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.app_version}",
    )
    parser.add_argument(
        "breeds",
        nargs="+",
        help="Breed names to look up",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=1,
        help="Look each breed up this many times (default: 1)",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Use the built-in local fetcher instead of the Dog API",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=default_level,
        help=f"Logging level (default: {default_level})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    api_fetcher: Optional[DogApiBreedFetcher] = None
    if args.local:
        source: IBreedFetcher = LocalBreedFetcher()
    else:
        source = api_fetcher = DogApiBreedFetcher()
    fetcher = CachingBreedFetcher(source)

    exit_code = 0
    try:
        for _ in range(max(args.repeat, 1)):
            for breed in args.breeds:
                try:
                    sub_breeds = fetcher.get_sub_breeds(breed)
                except BreedNotFoundError as e:
                    print(f"{breed}: not found")
                    logger.debug(f"Lookup failed: {e.to_dict()}")
                    exit_code = 1
                    continue
                print(f"{breed}: {', '.join(sub_breeds) if sub_breeds else '(no sub-breeds)'}")
    except BreedFetcherError as e:
        logger.error(f"Breed source failed: {e.message}")
        return 2
    finally:
        if api_fetcher is not None:
            api_fetcher.close()

    stats = fetcher.get_stats()
    print(f"Calls made: {fetcher.get_calls_made()}")
    logger.info(f"Cache stats: hits={stats.hits} size={stats.size} hit_rate={stats.hit_rate:.2%}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
