# /tests/describe_test.py
#
# Tests for the debpkginfo-describe command.
#
# Disable no-self-use in tests as all test methods must be
# instance methods and we don't necessarily have to use a matcher
# with them.
# pylint:  disable=no-self-use
#
# See /LICENCE.md for Copyright information
"""Tests for the debpkginfo-describe command."""

import io

import os

from unittest import mock

from debpkginfo import acquire, describe, printer

from debpkginfo.logger import NullLogger
from debpkginfo.options import package_options

from tests.testutil import DATA_FILES, md5, make_deb

import tempdir

from testtools import TestCase

from testtools.matchers import Contains, Equals, Not


class TestDescribe(TestCase):

    """Tests for debpkginfo/describe.py."""

    def setUp(self):  # NOQA
        """Write a package to describe."""
        super(TestDescribe, self).setUp()
        self.directory = tempdir.TempDir()
        self.addCleanup(self.directory.dissolve)
        self.package = os.path.join(self.directory.name, "hello.deb")
        with open(self.package, "wb") as package:
            package.write(make_deb())

    def _run(self, *arguments):
        """Run main and return (status, stdout, stderr)."""
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr",
                                                          stderr):
            status = describe.main(arguments=list(arguments))

        return status, stdout.getvalue(), stderr.getvalue()

    def test_summary(self):
        """Check that the package name and scripts are printed."""
        status, output, _ = self._run(self.package)
        self.assertThat(status, Equals(0))
        self.assertThat(output, Contains("hello 1.0-1 (amd64)"))
        self.assertThat(output, Contains("postinst"))
        self.assertThat(output, Not(Contains("./usr/bin/hello")))

    def test_files_and_checksums(self):
        """Check that --files --checksums lists files with their hashes."""
        status, output, _ = self._run(self.package, "--files", "--checksums")
        self.assertThat(status, Equals(0))
        self.assertThat(output, Contains("./usr/bin/hi -> hello"))
        self.assertThat(output,
                        Contains(md5(DATA_FILES["./usr/bin/hello"])))

    def test_failed_package_sets_status(self):
        """Check that a missing package is reported without stopping."""
        missing = os.path.join(self.directory.name, "missing.deb")
        status, output, errors = self._run(missing, self.package)
        self.assertThat(status, Equals(1))
        self.assertThat(errors, Contains("missing.deb"))
        self.assertThat(output, Contains("hello 1.0-1"))

    def test_bad_hash(self):
        """Check that an unknown --hash is reported before reading."""
        status, _, errors = self._run(self.package, "--hash", "crc32")
        self.assertThat(status, Equals(2))
        self.assertThat(errors, Contains("crc32"))


class TestPackageSummary(TestCase):

    """Tests for debpkginfo/printer.py."""

    def test_removed_package_file(self):
        """Check that a package file removed after reading is reported."""
        with tempdir.TempDir() as directory:
            path = os.path.join(directory, "hello.deb")
            with open(path, "wb") as package_file:
                package_file.write(make_deb())

            package = acquire.open_package_file(
                path,
                package_options(logger=NullLogger()))
            os.remove(path)

            summary = printer.package_summary(package)

        self.assertThat(summary, Contains("hello 1.0-1 (amd64)"))
        self.assertThat(summary, Contains("SHA256: " + path))
