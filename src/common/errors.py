"""
ABF pickup error types and handling utilities.

Every failure of a pickup call surfaces as one of four distinct exceptions so
callers can tell "fix the input" apart from "try again later":

- PickupValidationError: the request is structurally invalid (checked before any I/O)
- TransportError: the HTTP exchange with ABF failed
- DecodeError: ABF answered with something that is not the expected XML
- CarrierRejectionError: ABF answered but did not schedule the pickup
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import requests

from common.logging import get_logger

if TYPE_CHECKING:
    from services.abf.schemas import PickupResponse

logger = get_logger(__name__)


class AbfError(Exception):
    """Base class for every error raised by the ABF pickup client."""


class PickupValidationError(AbfError):
    """Caller-supplied data violates a structural constraint of the pickup API."""


class TransportError(AbfError):
    """The HTTP exchange failed (connection refused, timeout, TLS, non-2xx status)."""

    def __init__(self, operation: str, message: str, status_code: int | None = None):
        self.operation = operation
        self.status_code = status_code
        super().__init__(f"{operation}: {message}")


class DecodeError(AbfError):
    """The response body could not be read as an ABF XML document."""

    def __init__(self, message: str, body: bytes = b""):
        self.body = body
        super().__init__(f"{message} (body: {summarize_body(body)})")


class CarrierRejectionError(AbfError):
    """ABF parsed the request but returned no confirmation number."""

    def __init__(self, code: str, message: str, response: "PickupResponse"):
        self.code = code
        self.message = message
        self.response = response
        detail = f"[{code}] {message}" if code else message or "no error message returned"
        super().__init__(f"pickup request failed: {detail}")


def summarize_body(body: bytes, limit: int = 200) -> str:
    text = body.decode("utf-8", errors="replace").strip()
    if len(text) > limit:
        return text[:limit] + "..."
    return text or "<empty>"


@contextmanager
def handle_transport_errors(operation_name: str) -> Generator[None, None, None]:
    """
    Context manager for handling requests errors consistently.

    Catches requests exceptions, logs them, and re-raises as TransportError
    chained to the original exception.

    Usage:
        with handle_transport_errors("RequestPickup"):
            response = requests.post(url, data=payload, timeout=10)
            response.raise_for_status()

    Raises:
        TransportError: If the request failed or returned an error status.
    """
    try:
        yield
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        logger.error(f"[{operation_name}] ABF returned HTTP {status}")
        raise TransportError(operation_name, f"HTTP {status}", status_code=status) from e
    except requests.RequestException as e:
        logger.error(f"[{operation_name}] Request failed: {type(e).__name__}: {e!r}")
        raise TransportError(operation_name, f"{type(e).__name__}: {e}") from e
