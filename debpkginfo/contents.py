# /debpkginfo/contents.py
#
# Walk the tar archives inside control and data members.
#
# See /LICENCE.md for Copyright information
"""Walk the tar archives inside control and data members."""

import io

import posixpath

import tarfile

from collections import namedtuple

from datetime import datetime, timezone

from debpkginfo.errors import FormatViolation


class FileRecord(namedtuple("FileRecord",
                            "path mode size mtime owner group linkname "
                            "type")):
    """Metadata of one entry in data.tar.

    path is kept exactly as it appears in the archive, usually with a
    leading "./". mode holds permission bits only, type is the tar type
    flag.
    """

    __slots__ = ()

    @classmethod
    def from_tarinfo(cls, info):
        """Build a FileRecord out of a tarfile.TarInfo."""
        return cls(path=info.name,
                   mode=info.mode,
                   size=info.size,
                   mtime=datetime.fromtimestamp(info.mtime, tz=timezone.utc),
                   owner=info.uname,
                   group=info.gname,
                   linkname=info.linkname,
                   type=info.type)

    def is_regular(self):
        """Return true if this is a regular file."""
        return self.type in tarfile.REGULAR_TYPES

    def is_dir(self):
        """Return true if this is a directory."""
        return self.type == tarfile.DIRTYPE

    def is_symlink(self):
        """Return true if this is a symbolic link."""
        return self.type == tarfile.SYMTYPE

    def is_hardlink(self):
        """Return true if this is a hard link."""
        return self.type == tarfile.LNKTYPE


def _open_tar(payload, member):
    try:
        return tarfile.open(fileobj=io.BytesIO(payload), mode="r:")
    except tarfile.TarError as error:
        raise FormatViolation("""Cannot read tar archive: """
                              """{0}""".format(error), member=member) from error


def _read_entry(tar, info, member):
    """Read the whole content of regular file info into memory."""
    try:
        return tar.extractfile(info).read()
    except (tarfile.TarError, OSError, EOFError) as error:
        raise FormatViolation("""Cannot read {0}: {1}""".format(info.name,
                                                                 error),
                              member=member) from error


def _record(info, member):
    """Return the FileRecord of info, or raise for an unusable header."""
    try:
        return FileRecord.from_tarinfo(info)
    except (ValueError, OverflowError, OSError) as error:
        raise FormatViolation("""Bad header for {0}: {1}""".format(info.name,
                                                                    error),
                              member=member) from error


def walk(payload, member, read_content):
    """Yield (FileRecord, content) for each entry of a tar payload.

    Entries come in archive order. content holds the whole file for
    regular files if read_content is true, and is None otherwise.
    """
    with _open_tar(payload, member) as tar:
        try:
            for info in tar:
                record = _record(info, member)
                content = None
                if read_content and info.isreg():
                    content = _read_entry(tar, info, member)

                yield record, content
        except tarfile.TarError as error:
            raise FormatViolation("""Corrupt tar archive: """
                                  """{0}""".format(error),
                                  member=member) from error


def read_members(payload, member):
    """Yield (name, content) for the regular files of a control payload.

    The leading "./" is removed from names.
    """
    for record, content in walk(payload, member, read_content=True):
        if record.is_regular():
            yield posixpath.normpath(record.path).lstrip("/"), content
