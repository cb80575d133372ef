# /tests/contents_test.py
#
# Tests for walking tar archives.
#
# Disable no-self-use in tests as all test methods must be
# instance methods and we don't necessarily have to use a matcher
# with them.
# pylint:  disable=no-self-use
#
# See /LICENCE.md for Copyright information
"""Tests for walking tar archives."""

from datetime import datetime, timezone

from debpkginfo import contents

from debpkginfo.errors import FormatViolation

from tests.testutil import DATA_DIRS, DATA_FILES, DATA_SYMLINKS, make_tar

from testtools import ExpectedException
from testtools import TestCase

from testtools.matchers import AllMatch, Equals, HasLength, Is


def _data_tar():
    return make_tar(DATA_FILES, DATA_DIRS, DATA_SYMLINKS)


class TestWalk(TestCase):

    """Tests for debpkginfo/contents.py."""

    def test_every_entry_recorded_in_order(self):
        """Check that directories, links and files come in tar order."""
        records = [r for r, _ in contents.walk(_data_tar(), "data.tar", True)]
        self.assertThat([r.path for r in records][-4:],
                        Equals(["./usr/bin/hi"] + list(DATA_FILES)))
        self.assertThat(records, HasLength(len(DATA_DIRS) +
                                           len(DATA_SYMLINKS) +
                                           len(DATA_FILES)))

    def test_only_regular_files_have_content(self):
        """Check that content is read for regular files only."""
        walked = dict((r.path, c) for r, c in
                      contents.walk(_data_tar(), "data.tar", True))
        self.assertThat(walked["./usr/bin/hello"],
                        Equals(DATA_FILES["./usr/bin/hello"]))
        self.assertThat(walked["./usr/bin/hi"], Is(None))
        self.assertThat(walked["./usr"], Is(None))

    def test_meta_only_reads_no_content(self):
        """Check that no content is read when it is not asked for."""
        walked = list(contents.walk(_data_tar(), "data.tar", False))
        self.assertThat([c for _, c in walked], AllMatch(Is(None)))

    def test_record_metadata(self):
        """Check that a FileRecord carries the tar header fields."""
        records = dict((r.path, r) for r, _ in
                       contents.walk(_data_tar(), "data.tar", False))
        hello = records["./usr/bin/hello"]
        link = records["./usr/bin/hi"]

        self.assertThat((hello.mode, hello.size, hello.owner, hello.group),
                        Equals((0o755, len(DATA_FILES["./usr/bin/hello"]),
                                "root", "root")))
        self.assertThat(hello.mtime,
                        Equals(datetime.fromtimestamp(1500000000,
                                                      tz=timezone.utc)))
        self.assertTrue(hello.is_regular())
        self.assertTrue(link.is_symlink())
        self.assertThat(link.linkname, Equals("hello"))
        self.assertTrue(records["./usr"].is_dir())

    def test_garbage_raises(self):
        """Check that a payload that is not a tar is a FormatViolation."""
        with ExpectedException(FormatViolation):
            list(contents.walk(b"\x01" * 1024, "data.tar.gz", False))

    def test_out_of_range_mtime(self):
        """Check that an unrepresentable timestamp is a FormatViolation."""
        payload = make_tar(DATA_FILES, mtime=10 ** 12)
        with ExpectedException(FormatViolation, ".*data.tar.*"):
            list(contents.walk(payload, "data.tar", False))


class TestReadMembers(TestCase):

    """Tests for reading control.tar members."""

    def test_out_of_range_mtime(self):
        """Check that control members with huge timestamps are refused."""
        payload = make_tar({"./control": b"Package: a\n"}, mtime=10 ** 12)
        with ExpectedException(FormatViolation):
            list(contents.read_members(payload, "control.tar"))

    def test_names_lose_dot_slash(self):
        """Check that control file names come back without ./."""
        payload = make_tar({"./control": b"Package: a\n",
                            "./postinst": b"#!/bin/sh\n"},
                           directories=("./",))
        self.assertThat(dict(contents.read_members(payload, "control.tar")),
                        Equals({"control": b"Package: a\n",
                                "postinst": b"#!/bin/sh\n"}))
