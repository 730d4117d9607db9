"""Fetch URLs: copy, read, annotate with status, and time many at once."""

from __future__ import annotations

import http.client
import sys
import time
import urllib.error
import urllib.request
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime
from pathlib import Path
from typing import Any, BinaryIO

__all__ = [
    "FetchError",
    "normalize_url",
    "copy_url",
    "fetch",
    "fetch_with_status",
    "fetch_report",
    "fetch_all",
]

_CHUNK = 64 * 1024
_ERRORS = (OSError, ValueError, http.client.HTTPException)


class FetchError(Exception):
    """A URL could not be fetched or its body could not be read."""


def normalize_url(url: str) -> str:
    """Prefix http:// unless the URL already starts with http:// or https://."""
    if url.startswith(("https://", "http://")):
        return url
    return "http://" + url


def _open(url: str, timeout: float | None = None) -> Any:
    """Open url; an HTTP error status still yields its response."""
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        return urllib.request.urlopen(url, **kwargs)
    except urllib.error.HTTPError as exc:
        return exc


def _copy(source: Any, sink: BinaryIO | None) -> int:
    copied = 0
    while chunk := source.read(_CHUNK):
        if sink is not None:
            sink.write(chunk)
        copied += len(chunk)
    return copied


def copy_url(url: str, out: BinaryIO | None = None) -> int:
    """Stream the body of url to out (standard output by default); return its length."""
    sink = sys.stdout.buffer if out is None else out
    try:
        response = _open(url)
    except _ERRORS as exc:
        raise FetchError(f"http.Get: {exc}") from exc
    with response:
        try:
            return _copy(response, sink)
        except _ERRORS as exc:
            raise FetchError(f"io.Copy: {url}: {exc}") from exc


def fetch(url: str) -> bytes:
    """Return the body of url, adding http:// when no scheme is given."""
    url = normalize_url(url)
    try:
        response = _open(url)
    except _ERRORS as exc:
        raise FetchError(f"fetch: get {exc}") from exc
    with response:
        try:
            return response.read()
        except _ERRORS as exc:
            raise FetchError(f"fetch: read {url} {exc}") from exc


def fetch_with_status(url: str) -> bytes:
    """Return the body of url followed by an HTML comment holding the status line."""
    url = normalize_url(url)
    try:
        response = _open(url)
    except _ERRORS as exc:
        raise FetchError(f"fetch: {exc}") from exc
    with response:
        try:
            body = response.read()
        except _ERRORS as exc:
            raise FetchError(f"fetch: reading {url}: {exc}") from exc
        status = f"<!-- {response.getcode()} {response.reason} -->"
    return body + status.encode("utf-8")


def fetch_report(url: str, timeout: float | None = None) -> str:
    """Fetch url, discard the body and describe the outcome in one report entry.

    Without a timeout a failed request is reported by its error alone; with
    one, the elapsed time comes first and the entry ends in a newline.
    """
    start = time.perf_counter()
    try:
        response = _open(url, timeout)
    except _ERRORS as exc:
        if timeout is None:
            return str(exc)
        return f"{time.perf_counter() - start:.3f}s {exc}\n"
    with response:
        try:
            size = _copy(response, None)
        except _ERRORS as exc:
            return f"while reading {url}: {exc}"
    return f"{time.perf_counter() - start:.3f}s {size:7d} {url}\n"


def fetch_all(
    urls: Iterable[str],
    timeout: float | None = None,
    directory: str | Path = ".",
) -> Path:
    """Fetch all urls concurrently and write the reports, in order of completion,
    to out_DD_MM_YYYY__HH_MM_SS.txt in directory; return that file's path."""
    start = time.perf_counter()
    urls = list(urls)
    parts: list[str] = []
    if urls:
        with ThreadPoolExecutor(max_workers=len(urls)) as pool:
            futures = [pool.submit(fetch_report, url, timeout) for url in urls]
            parts.extend(future.result() for future in as_completed(futures))
    parts.append(f"{time.perf_counter() - start:.3f}s elapsed\n")

    name = datetime.now().strftime("out_%d_%m_%Y__%H_%M_%S.txt")
    path = Path(directory) / name
    path.write_text("".join(parts), encoding="utf-8")
    return path