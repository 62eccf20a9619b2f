"""GitLab API v3 client with method dispatch by name, pagination and retry support."""

from __future__ import annotations

import logging
import time
import urllib.parse
from typing import Any, Iterator

import requests

from gl_api.errors import OperationError
from gl_api.methods import get_method_registry
from gl_api.models import (
    DEFAULT_MAX_RETRIES,
    PER_PAGE,
    RETRY_BACKOFF_FACTOR,
    RETRYABLE_STATUS_CODES,
    ApiMethod,
)


class GitLabClient:
    """Thin wrapper around GitLab REST API v3 exposing every registered method by name."""

    def __init__(self, url: str, token: str | None = None, max_retries: int = DEFAULT_MAX_RETRIES):
        self.api_url = url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if token:
            self.session.headers.update({"PRIVATE-TOKEN": token})
        self.max_retries = max_retries
        self.logger = logging.getLogger("gl-api")

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Make an HTTP request with retry logic for transient failures."""
        url = f"{self.api_url}{endpoint}"
        last_exception: Exception | None = None

        for attempt in range(self.max_retries + 1):
            try:
                self.logger.debug(
                    f"{method.upper()} {url} {kwargs.get('params') or ''} {kwargs.get('json') or ''} "
                    f"(attempt {attempt + 1}/{self.max_retries + 1})"
                )
                resp = self.session.request(method, url, **kwargs)

                # Retry on rate limit or server errors
                if resp.status_code in RETRYABLE_STATUS_CODES and attempt < self.max_retries:
                    wait_time = self._calculate_backoff(resp, attempt)
                    self.logger.warning(f"Retryable error {resp.status_code}, waiting {wait_time:.1f}s before retry")
                    time.sleep(wait_time)
                    continue

                if resp.status_code >= 400:
                    self.logger.debug(f"API error {resp.status_code}: {resp.text[:500]}")
                resp.raise_for_status()
                return resp

            except requests.exceptions.ConnectionError as e:
                last_exception = e
                if attempt < self.max_retries:
                    wait_time = RETRY_BACKOFF_FACTOR * (2**attempt)
                    self.logger.warning(f"Connection error, retrying in {wait_time:.1f}s: {e}")
                    time.sleep(wait_time)
                    continue
                raise

        if last_exception:
            raise last_exception
        raise RuntimeError("Unexpected retry loop exit")

    def _calculate_backoff(self, resp: requests.Response, attempt: int) -> float:
        """Calculate backoff time, respecting Retry-After header for 429s."""
        if resp.status_code == 429:
            retry_after = resp.headers.get("Retry-After")
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass  # Fall through to exponential backoff
        return RETRY_BACKOFF_FACTOR * (2**attempt)

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        """Decode a response body; an empty body means there is no result."""
        if resp.status_code == 204 or not resp.content.strip():
            return None
        try:
            return resp.json()
        except ValueError:
            # Raw endpoints (blobs, files) answer with plain text
            return resp.text

    # -- Method resolution --

    def _resolve(self, method: str, args: tuple) -> tuple[ApiMethod, str]:
        """Look up a method by name and fill its path placeholders from args."""
        api_method = get_method_registry().get(method)
        if api_method is None:
            raise OperationError(f"Unknown method: {method}")

        names = api_method.placeholders
        if len(args) != len(names):
            expected = " ".join(f"<{name}>" for name in names) or "no arguments"
            raise OperationError(f"{method} takes {len(names)} positional argument(s) ({expected}), got {len(args)}")

        values = iter(args)
        segments = [
            urllib.parse.quote(str(next(values)), safe="") if part.startswith(":") else part
            for part in api_method.path.split("/")
        ]
        return api_method, "/".join(segments)

    def invoke(self, method: str, *args: Any) -> Any:
        """
        Call a registered method.

        Positional args fill the path placeholders in order; a trailing dict is
        sent as query string (GET/DELETE) or JSON body (POST/PUT).
        """
        params = None
        if args and isinstance(args[-1], dict):
            params = args[-1]
            args = args[:-1]

        api_method, endpoint = self._resolve(method, args)
        if api_method.verb in ("GET", "DELETE"):
            resp = self._request(api_method.verb, endpoint, params=params)
        else:
            resp = self._request(api_method.verb, endpoint, json=params)
        return self._decode(resp)

    def paginator(self, method: str, *args: Any) -> Paginator:
        """Return a cursor over every page of a paginated method."""
        api_method, endpoint = self._resolve(method, args)
        if not api_method.paginated:
            raise OperationError(f"{method} does not return a paginated list")
        return Paginator(self, api_method, endpoint)


class Paginator:
    """Walks the pages of a list endpoint one request at a time."""

    def __init__(self, client: GitLabClient, api_method: ApiMethod, endpoint: str, per_page: int = PER_PAGE):
        self.client = client
        self.api_method = api_method
        self.endpoint = endpoint
        self.per_page = per_page
        self.page = 0
        self._exhausted = False

    def next_page(self) -> list | None:
        """Fetch the next page, or None once there are no more."""
        if self._exhausted:
            return None

        self.page += 1
        resp = self.client._request("GET", self.endpoint, params={"page": self.page, "per_page": self.per_page})
        data = self.client._decode(resp)
        if not data:
            self._exhausted = True
            return None
        if not isinstance(data, list):
            raise OperationError(f"{self.api_method.name} did not return a list (page {self.page})")

        # Check if there are more pages
        next_page = resp.headers.get("x-next-page")
        total_pages = resp.headers.get("x-total-pages")
        if next_page is not None:
            self._exhausted = not next_page.strip()
        elif total_pages is not None and total_pages.strip().isdigit():
            self._exhausted = self.page >= int(total_pages)
        else:
            self._exhausted = len(data) < self.per_page
        return data

    def __iter__(self) -> Iterator[Any]:
        while True:
            page = self.next_page()
            if page is None:
                return
            yield from page

    def all(self) -> list:
        """Drain every remaining page into one list."""
        return list(self)
