"""
Error types for breed lookups.
"""

from typing import Any, Dict, Optional


class BreedLookupError(Exception):
    """Base exception for breed lookups."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict for logging and CLI output."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(BreedLookupError, ValueError):
    """A required argument was missing or unusable."""

    def __init__(self, message: str = "Invalid argument", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_ARGUMENT", message, details)


class BreedNotFoundError(BreedLookupError):
    """The requested breed does not exist."""

    def __init__(self, breed: Optional[str], message: Optional[str] = None):
        self.breed = breed
        super().__init__(
            "BREED_NOT_FOUND",
            message or f"Breed not found: {breed!r}",
            {"breed": breed},
        )


class BreedFetcherError(BreedLookupError):
    """The underlying data source failed (transport, payload, status)."""

    def __init__(self, message: str = "Breed fetcher error", details: Optional[Dict[str, Any]] = None):
        super().__init__("FETCHER_ERROR", message, details)
