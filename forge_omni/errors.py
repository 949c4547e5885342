"""Error types raised by the Omni gateway client.

Purpose:
- Provide a closed set of typed exceptions thrown by `OmniClient`.
- Distinguish the layer a call failed at, so callers can decide on retry,
  alerting or fallback themselves.

Usage:
- Catch `OmniClientError` for any gateway failure and branch on `kind`, or
  catch the concrete subclasses:
  - `OmniTransportError`: no HTTP response was obtained (DNS, connect, TLS, timeout).
  - `OmniHttpError`: the gateway answered with a non-2xx status; inspect
    `status_code` and the raw `body`.
  - `OmniDecodeError`: a 2xx body did not match the expected JSON shape.
"""

from __future__ import annotations

from enum import Enum


class OmniErrorKind(str, Enum):
    TRANSPORT = "transport"
    HTTP = "http"
    DECODE = "decode"


class OmniClientError(Exception):
    """Base error for Omni gateway failures.

    Args:
        message: Human-readable error description.
    """

    kind: OmniErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OmniTransportError(OmniClientError):
    """Raised when the request failed before any HTTP status was known."""

    kind = OmniErrorKind.TRANSPORT

    def __init__(self, message: str) -> None:
        super().__init__(f"Omni request failed: {message}")


class OmniHttpError(OmniClientError):
    """Raised when the gateway returns a status outside 200-299.

    Args:
        status_code: HTTP status returned by the gateway.
        body: Raw response text, kept verbatim (not guaranteed to be JSON).
    """

    kind = OmniErrorKind.HTTP

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Omni API returned error status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class OmniDecodeError(OmniClientError):
    """Raised when a successful response body cannot be decoded."""

    kind = OmniErrorKind.DECODE

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to decode Omni response: {message}")
