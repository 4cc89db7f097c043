"""HTTP fetch of JSON chart sources."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any
from urllib import error, parse, request

from chart_lens.exceptions import FetchError, HTTPStatusError, InvalidJSONError, InvalidURLError

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = {"http", "https"}


def _safe_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class FetchConfig:
    timeout_sec: float = 10.0
    user_agent: str = "chart-lens"

    @classmethod
    def from_env(cls) -> "FetchConfig":
        return cls(timeout_sec=_safe_float(os.getenv("CHART_LENS_FETCH_TIMEOUT_SEC"), 10.0))


def validate_url(url: str | None) -> str:
    """Return the stripped URL, or raise InvalidURLError."""
    value = (url or "").strip()
    if not value:
        raise InvalidURLError("Please enter a valid URL")
    parsed = parse.urlparse(value)
    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.netloc:
        raise InvalidURLError(f"Only http(s) URLs are supported: {value}")
    return value


def fetch_json(url: str, *, config: FetchConfig | None = None) -> Any:
    """Fetch ``url`` and decode its body as JSON.

    Raises:
        InvalidURLError: If the URL is empty or not http(s).
        HTTPStatusError: If the server answers with a non-2xx status.
        FetchError: If the server cannot be reached.
        InvalidJSONError: If the body is not valid JSON.
    """
    config = config or FetchConfig()
    target = validate_url(url)
    req = request.Request(
        target,
        headers={"Accept": "application/json", "User-Agent": config.user_agent},
        method="GET",
    )
    try:
        with request.urlopen(req, timeout=config.timeout_sec) as response:
            status = response.status
            body = response.read()
    except error.HTTPError as exc:
        raise HTTPStatusError(exc.code, target) from exc
    except (error.URLError, TimeoutError, ConnectionError) as exc:
        reason = getattr(exc, "reason", exc)
        logger.warning("fetch failed for %s: %s", target, reason)
        raise FetchError(f"Failed to fetch {target}: {reason}") from exc

    if not 200 <= status < 300:
        raise HTTPStatusError(status, target)

    logger.debug("fetched %d bytes from %s", len(body), target)
    try:
        return json.loads(body)
    except ValueError as exc:
        raise InvalidJSONError(f"Response from {target} is not valid JSON") from exc
