# /tests/acquire_test.py
#
# Tests for opening packages from paths and URLs.
#
# Disable no-self-use in tests as all test methods must be
# instance methods and we don't necessarily have to use a matcher
# with them.
# pylint:  disable=no-self-use
#
# See /LICENCE.md for Copyright information
"""Tests for opening packages from paths and URLs."""

import hashlib

import os

from datetime import datetime, timezone

from unittest import mock

from debpkginfo import acquire

from debpkginfo.errors import PackageIOError
from debpkginfo.logger import NullLogger
from debpkginfo.options import package_options

import requests

from requests.structures import CaseInsensitiveDict

from tests.testutil import make_deb

import tempdir

from testtools import ExpectedException
from testtools import TestCase

from testtools.matchers import Equals, Is

URL = "https://deb.example.com/pool/main/h/hello/hello_1.0-1_amd64.deb"


def _fake_response(content, headers=None, status=200):
    """Return a stand-in for requests.Response."""
    response = mock.Mock()
    response.content = content
    response.headers = CaseInsensitiveDict(headers or {})
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            "{0} Error".format(status))

    return response


class TestIsUrl(TestCase):

    """Tests for telling URLs from paths."""

    def test_http_schemes(self):
        """Check that http and https URLs in any case are URLs."""
        self.assertTrue(acquire.is_url("http://example.com/a.deb"))
        self.assertTrue(acquire.is_url("HTTPS://example.com/a.deb"))

    def test_paths(self):
        """Check that paths and other schemes are not URLs."""
        self.assertFalse(acquire.is_url("/srv/http/a.deb"))
        self.assertFalse(acquire.is_url("ftp://example.com/a.deb"))


class TestOpenPath(TestCase):

    """Tests for opening packages from the local filesystem."""

    def setUp(self):  # NOQA
        """Create a directory to hold packages."""
        super(TestOpenPath, self).setUp()
        self.options = package_options(logger=NullLogger())
        self.directory = tempdir.TempDir()
        self.addCleanup(self.directory.dissolve)

    def test_path_metadata(self):
        """Check that size, time and path come from the file."""
        data = make_deb()
        path = os.path.join(self.directory.name, "hello.deb")
        with open(path, "wb") as package_file:
            package_file.write(data)
        os.utime(path, (1500000000, 1500000000))

        package = acquire.open_package_file(path, self.options)
        self.assertThat(package.path(), Equals(path))
        self.assertThat(package.file_size(), Equals(len(data)))
        self.assertThat(package.file_time(),
                        Equals(datetime.fromtimestamp(1500000000,
                                                      tz=timezone.utc)))
        self.assertThat(package.get_package_checksum().md5(),
                        Equals(hashlib.md5(data).hexdigest()))

    def test_missing_path_raises(self):
        """Check that a missing package is a non-retryable IO error."""
        path = os.path.join(self.directory.name, "missing.deb")
        with ExpectedException(PackageIOError):
            acquire.open_package_file(path, self.options)

        try:
            acquire.open_package_file(path, self.options)
        except PackageIOError as error:
            self.assertFalse(error.retryable)
            self.assertIsInstance(error, IOError)


class TestOpenUrl(TestCase):

    """Tests for fetching packages over HTTP."""

    def setUp(self):  # NOQA
        """Set up options."""
        super(TestOpenUrl, self).setUp()
        self.options = package_options(logger=NullLogger())

    def test_headers_used(self):
        """Check that Content-Length and Last-Modified are used."""
        data = make_deb()
        response = _fake_response(data, {
            "Content-Length": "12345",
            "Last-Modified": "Wed, 21 Oct 2015 07:28:00 GMT"
        })
        with mock.patch("requests.get", return_value=response) as get:
            package = acquire.open_package_file(URL, self.options)

        get.assert_called_once_with(URL)
        self.assertThat(package.path(), Equals(URL))
        self.assertThat(package.file_size(), Equals(12345))
        self.assertThat(package.file_time(),
                        Equals(datetime(2015, 10, 21, 7, 28,
                                        tzinfo=timezone.utc)))
        self.assertThat(package.control_file().get("Package"),
                        Equals("hello"))
        self.assertThat(package.get_package_checksum().sha1(),
                        Equals(hashlib.sha1(data).hexdigest()))

    def test_malformed_last_modified_ignored(self):
        """Check that a bad Last-Modified leaves the time unset."""
        data = make_deb()
        response = _fake_response(data, {"Last-Modified": "yesterday"})
        with mock.patch("requests.get", return_value=response):
            package = acquire.open_package_file(URL, self.options)

        self.assertThat(package.file_time(), Is(None))
        self.assertThat(package.file_size(), Equals(len(data)))

    def test_negative_content_length_ignored(self):
        """Check that a negative Content-Length falls back to the body."""
        data = make_deb()
        response = _fake_response(data, {"Content-Length": "-5"})
        with mock.patch("requests.get", return_value=response):
            package = acquire.open_package_file(URL, self.options)

        self.assertThat(package.file_size(), Equals(len(data)))

    def test_http_error_is_retryable(self):
        """Check that a failed request is a retryable IO error."""
        response = _fake_response(b"", status=503)
        with mock.patch("requests.get", return_value=response):
            with ExpectedException(PackageIOError):
                acquire.open_package_file(URL, self.options)

    def test_connection_error(self):
        """Check that a connection failure is a retryable IO error."""
        with mock.patch("requests.get",
                        side_effect=requests.ConnectionError("refused")):
            try:
                acquire.open_package_file(URL, self.options)
            except PackageIOError as error:
                self.assertTrue(error.retryable)
            else:
                self.fail("PackageIOError not raised")
