"""
Failure kinds raised by the directory core.

Every failure carries a ``FailureKind`` tag so that the boundary layer
can translate it with a single lookup instead of a chain of
``except`` clauses.  Nothing in the core retries or recovers; these
exceptions always reach the caller unchanged.
"""

from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_RATE_LIMITED = "upstream_rate_limited"
    UPSTREAM_REJECTED = "upstream_rejected"
    UPSTREAM_NOT_FOUND = "upstream_not_found"
    UPSTREAM_FAULT = "upstream_fault"
    DECODE_ERROR = "decode_error"


class DirectoryError(Exception):
    """Base class for all failures surfaced by the directory core.

    Attributes
    ----------
    kind : FailureKind
        Tag identifying the failure.
    message : str
        Human readable description, usually taken from upstream.
    status_code : Optional[int]
        HTTP status reported by upstream, when there was one.
    """

    kind: FailureKind

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r}, status_code={self.status_code!r})"


class UpstreamUnavailable(DirectoryError):
    """Upstream could not be reached (connection refused, timeout)."""

    kind = FailureKind.UPSTREAM_UNAVAILABLE


class UpstreamRateLimited(DirectoryError):
    """Upstream answered 429."""

    kind = FailureKind.UPSTREAM_RATE_LIMITED


class UpstreamRejected(DirectoryError):
    """Upstream answered with a client error other than 404 or 429."""

    kind = FailureKind.UPSTREAM_REJECTED


class UpstreamNotFound(DirectoryError):
    """Upstream answered 404."""

    kind = FailureKind.UPSTREAM_NOT_FOUND


class UpstreamFault(DirectoryError):
    """Upstream answered with a 5xx status."""

    kind = FailureKind.UPSTREAM_FAULT


class DecodeError(DirectoryError):
    """An upstream payload could not be reshaped into the expected type."""

    kind = FailureKind.DECODE_ERROR


def error_for_status(status_code: int, message: str) -> DirectoryError:
    """Build the failure matching an upstream HTTP error status."""
    if status_code == 429:
        return UpstreamRateLimited(message, status_code)
    if status_code == 404:
        return UpstreamNotFound(message, status_code)
    if 400 <= status_code < 500:
        return UpstreamRejected(message, status_code)
    return UpstreamFault(message, status_code)
