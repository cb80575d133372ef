# /debpkginfo/acquire.py
#
# Open packages from a local path or an HTTP(S) URL.
#
# See /LICENCE.md for Copyright information
"""Open packages from a local path or an HTTP(S) URL."""

import io

import os

from datetime import datetime, timezone

from email.utils import parsedate_to_datetime

import requests

from debpkginfo.errors import PackageIOError
from debpkginfo.options import DEFAULT_OPTIONS
from debpkginfo.reader import PackageReader


def is_url(uri):
    """Return true if uri should be fetched over HTTP."""
    return "://" in uri and uri.lower().startswith("http")


def _parse_last_modified(value):
    """Return the datetime in a Last-Modified header, or None."""
    if not value:
        return None

    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None

    if parsed is None:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return parsed


def _content_length(response):
    """Return the declared body length, or the length of the body."""
    try:
        length = int(response.headers.get("content-length"))
    except (TypeError, ValueError):
        return len(response.content)

    if length < 0:
        return len(response.content)

    return length


def _open_package_url(url, options):
    """Fetch url with a single GET request and read it."""
    try:
        response = requests.get(url)
        response.raise_for_status()
    except requests.RequestException as error:
        raise PackageIOError(url, str(error), retryable=True) from error

    payload = response.content
    reader = PackageReader(io.BytesIO(payload), options)
    last_modified = response.headers.get("last-modified")
    return reader.read(path=url,
                       file_size=_content_length(response),
                       file_time=_parse_last_modified(last_modified),
                       payload=payload)


def _open_package_path(path, options):
    """Stat and read the package at path."""
    try:
        with open(path, "rb") as package:
            info = os.fstat(package.fileno())
            payload = package.read()
    except OSError as error:
        raise PackageIOError(path, error.strerror or str(error)) from error

    reader = PackageReader(io.BytesIO(payload), options)
    return reader.read(path=path,
                       file_size=info.st_size,
                       file_time=datetime.fromtimestamp(info.st_mtime,
                                                        tz=timezone.utc))


def open_package_file(uri, options=DEFAULT_OPTIONS):
    """Open the package at uri, which is a local path or an HTTP(S) URL."""
    if is_url(uri):
        return _open_package_url(uri, options)

    return _open_package_path(uri, options)
