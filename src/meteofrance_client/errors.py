"""
Exceptions raised by the client.

Three failure kinds, all subclasses of :class:`MeteoFranceError`:

- :class:`TransportError`: the request never produced a response
  (connection refused, timeout, TLS failure).
- :class:`HTTPStatusError`: a response arrived with a status outside 2xx.
- :class:`DecodeError`: a 2xx response whose body does not match the
  expected schema.
"""

from __future__ import annotations

from typing import Any


class MeteoFranceError(Exception):
    """Base class for every error raised by this package."""


class TransportError(MeteoFranceError):
    """Connection, timeout or TLS failure."""


class HTTPStatusError(MeteoFranceError):
    """Non-2xx HTTP response. The body is not inspected."""

    def __init__(self, status_code: int, reason: str, url: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"Request failed: {status_code} {reason}".rstrip())


class DecodeError(MeteoFranceError):
    """
    Response body could not be mapped onto the expected model.

    Attributes:
        path: Dotted location of the offending field (``position.name``,
            ``0.country``). Empty when the body is not valid JSON at all.
        fragment: The raw input found at ``path`` (``None`` when missing).
    """

    def __init__(self, message: str, path: str = "", fragment: Any = None) -> None:
        self.message = message
        self.path = path
        self.fragment = fragment
        where = f" at '{path}'" if path else ""
        super().__init__(f"Could not decode response{where}: {message}")
