"""Errors raised by the matching pipeline.

All of them propagate to the caller, which decides how to map them
(HTTP status, CLI exit code, ...). ``status_code`` is a suggestion only.
"""

from datetime import UTC, datetime


class MatchingError(Exception):
    """Base class for matching failures."""

    error_code = "MatchingError"
    status_code = 500

    def to_payload(self) -> dict[str, str]:
        """Build an error body suitable for returning to a client."""
        return {
            "error": self.error_code,
            "message": str(self),
            "timestamp": datetime.now(UTC).isoformat(),
        }


class ValidationError(MatchingError):
    """The student analysis is missing fields needed for matching."""

    error_code = "ValidationError"
    status_code = 400


class NotFoundError(MatchingError):
    """The candidate pool is empty."""

    error_code = "NotFoundError"
    status_code = 404


class NoMatchError(MatchingError):
    """No candidate cleared its acceptance threshold."""

    error_code = "NoMatchError"
    status_code = 404
