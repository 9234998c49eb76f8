"""Concurrent availability check of a list of URLs."""

from __future__ import annotations

import http.client
import urllib.request
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from http import HTTPStatus
from itertools import repeat

DEFAULT_TIMEOUT = 1.0
DEFAULT_WORKERS = 3

DEFAULT_URLS = (
    "http://ozon.ru",
    "https://ozon.ru",
    "http://google.com",
    "http://somesite.com",
    "http://non-existent.domain.tld",
    "https://ya.ru",
    "http://ya.ru",
    "http://ееее",
)


def _is_ok(url: str, timeout: float) -> bool:
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            return response.status == HTTPStatus.OK
    except (OSError, ValueError, http.client.HTTPException):
        return False


def check_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Return "<url> url - ok" if a GET answers 200, else "<url> url - not ok"."""
    verdict = "ok" if _is_ok(url, timeout) else "not ok"
    return f"{url} url - {verdict}"


def scrape_urls(
    urls: Iterable[str] = DEFAULT_URLS,
    num_workers: int = DEFAULT_WORKERS,
    timeout: float = DEFAULT_TIMEOUT,
) -> dict[str, str]:
    """Check every URL with ``num_workers`` threads and map each URL to its verdict."""
    if num_workers < 1:
        raise ValueError("num_workers must be at least 1")
    urls = list(urls)
    with ThreadPoolExecutor(max_workers=num_workers) as pool:
        verdicts = pool.map(check_url, urls, repeat(timeout))
        return dict(zip(urls, verdicts))