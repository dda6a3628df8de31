"""
Shared HTTP session with a default timeout and no automatic retries.

Failed requests surface immediately to the caller: the adapter is mounted
with ``Retry(total=0)`` so urllib3 never re-sends on its own, and every
request gets ``DEFAULT_TIMEOUT`` unless the caller passes ``timeout=``.

Usage::

    from meteofrance_client.services.http import create_session

    s = create_session(timeout=5)
    resp = s.get("https://webservice.meteofrance.com/places", params={...})
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from meteofrance_client import __version__
from meteofrance_client.config import DEFAULT_TIMEOUT

#: No retries, no redirects; status codes are checked by the caller.
NO_RETRY = Retry(
    total=0,
    redirect=0,
    raise_on_status=False,
    raise_on_redirect=False,
)

USER_AGENT = f"meteofrance-client/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the no-retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``NO_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or NO_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s
