#!/usr/bin/env python3
"""
Remote fetch capability for chapter data.

Implements:
- Fetcher.get(url) -> FetchResponse
- RequestsFetcher: plain HTTP GET via requests

Non-success statuses are returned, not raised; the loader decides what a
status means. Transport failures (DNS, refused, timeout) become FetchError
with status=None.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .errors import FetchError

logger = logging.getLogger(__name__)


@dataclass
class FetchResponse:
    """Status and raw body of a remote read."""
    url: str
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return json.loads(self.text)


class Fetcher:
    """Interface for the external read capability."""

    def get(self, url: str) -> FetchResponse:
        raise NotImplementedError


class RequestsFetcher(Fetcher):
    DEFAULT_TIMEOUT = 30  # seconds

    def __init__(self, timeout: int = None, session: Optional[requests.Session] = None):
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.session = session
        self._request_count = 0
        self._error_count = 0

    def get(self, url: str) -> FetchResponse:
        self._request_count += 1
        getter = self.session.get if self.session is not None else requests.get

        try:
            resp = getter(url, timeout=self.timeout)
        except requests.Timeout as e:
            self._error_count += 1
            logger.error(f"Fetch timeout: GET {url} (>{self.timeout}s)")
            raise FetchError(f"Request timed out: {url}", url=url) from e
        except requests.RequestException as e:
            self._error_count += 1
            logger.error(f"Fetch connection error: GET {url}: {e}")
            raise FetchError(f"Request failed: {url}: {e}", url=url) from e

        if resp.status_code >= 400:
            self._error_count += 1
            logger.warning(f"Fetch error: GET {url} -> {resp.status_code}")

        return FetchResponse(url=url, status_code=resp.status_code, text=resp.text)

    def get_stats(self) -> Dict[str, Any]:
        """Get client-side stats."""
        return {
            "total_requests": self._request_count,
            "total_errors": self._error_count,
            "error_rate_percent": (
                round(self._error_count / self._request_count * 100, 1)
                if self._request_count > 0 else 0
            ),
        }
