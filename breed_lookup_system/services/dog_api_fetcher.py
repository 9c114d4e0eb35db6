"""
Dog CEO API fetcher.

Reads sub-breeds from the public Dog CEO REST API
(GET {base_url}/breed/{breed}/list).
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import requests

from ..config import settings
from ..exceptions import BreedFetcherError, BreedNotFoundError
from ..interfaces.fetcher import IBreedFetcher

logger = logging.getLogger(__name__)


class DogApiBreedFetcher(IBreedFetcher):
    """
    Breed fetcher backed by the Dog CEO API.

    The API answers with {"status": "success", "message": [...]} for known
    breeds and with HTTP 404 plus {"status": "error", ...} for unknown ones.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Dog API fetcher.

        Args:
            base_url: API root (defaults to settings.dog_api_base_url)
            timeout: Request timeout in seconds (defaults to settings.request_timeout)
            session: Optional requests session (one is created if None)
        """
        self.base_url = (base_url or settings.dog_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.__session = session or requests.Session()

    def get_sub_breeds(self, breed: Optional[str]) -> List[str]:
        """
        Fetch sub-breeds from the API.

        Args:
            breed: Breed name (case-insensitive)

        Returns:
            List of sub-breed names

        Raises:
            BreedNotFoundError: If the breed is blank or unknown to the API
            BreedFetcherError: On transport errors or unexpected responses
        """
        if breed is None or not breed.strip():
            raise BreedNotFoundError(breed)

        # Escape the whole name so it stays a single path segment
        url = f"{self.base_url}/breed/{quote(breed.strip().lower(), safe='')}/list"
        logger.debug(f"GET {url}")

        try:
            resp = self.__session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise BreedFetcherError(
                f"Request failed: {e}", {"breed": breed, "url": url}
            ) from e

        try:
            body = resp.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON from {url} (status {resp.status_code})")
            raise BreedFetcherError(
                f"Invalid JSON: {e}",
                {"breed": breed, "url": url, "status_code": resp.status_code}
            ) from e

        status = body.get("status") if isinstance(body, dict) else None

        if resp.status_code == 200 and status == "success":
            message = body.get("message")
            if not isinstance(message, list):
                raise BreedFetcherError(
                    "Unexpected payload: 'message' is not a list",
                    {"breed": breed, "url": url, "status_code": resp.status_code}
                )
            return [str(name) for name in message]

        if resp.status_code == 404 and status == "error":
            raise BreedNotFoundError(breed, body.get("message") or None)

        logger.warning(f"Unexpected response from {url}: status={resp.status_code}")
        raise BreedFetcherError(
            f"Unexpected response (status {resp.status_code})",
            {"breed": breed, "url": url, "status_code": resp.status_code}
        )

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self.__session.close()
