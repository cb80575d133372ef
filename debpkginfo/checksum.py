# /debpkginfo/checksum.py
#
# Declared and calculated checksums of package contents.
#
# See /LICENCE.md for Copyright information
"""Declared and calculated checksums of package contents.

Packages ship an md5sums file for their payload (the declared checksums).
Those are keyed without the leading "./" that dpkg-deb puts in front of
every path in data.tar, and they usually omit conffiles. Calculated
checksums are computed while walking data.tar and keep the paths exactly
as they appear in the archive.
"""

import enum

import hashlib

import re

import threading

from collections import OrderedDict

from types import MappingProxyType

from debpkginfo.errors import ConfigurationError, PackageIOError

_WHITESPACE = re.compile(r"\s+")
_READ_CHUNK_SIZE = 1024 * 64


class HashKind(enum.Enum):
    """Hash algorithms a checksum can be computed with."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"

    @property
    def hex_length(self):
        """Length of a hex digest of this kind."""
        return {
            HashKind.MD5: 32,
            HashKind.SHA1: 40,
            HashKind.SHA256: 64
        }[self]

    def new(self):
        """Return a fresh hashlib object for this kind."""
        return hashlib.new(self.value)


def hash_kind(value):
    """Return the HashKind named by value, raise ConfigurationError if none.

    value may be a HashKind or its name in any case (md5, SHA1, ...).
    """
    if isinstance(value, HashKind):
        return value

    try:
        return HashKind(str(value).lower())
    except ValueError:
        raise ConfigurationError("""Unknown hash: {0!r}, expected one """
                                 """of {1}""".format(value,
                                                     ", ".join(k.value for k
                                                               in HashKind)))


def digest(data, kind):
    """Return the hex digest of data."""
    hasher = kind.new()
    hasher.update(data)
    return hasher.hexdigest()


def strip_dot_slash(path):
    """Remove one leading ./ from path."""
    if path.startswith("./"):
        return path[2:]

    return path


def parse_md5sums(data, logger):
    """Parse the md5sums control file into an ordered path to hash dict.

    Lines that do not consist of exactly a 32 character hash and a path
    are logged and skipped.
    """
    sums = OrderedDict()
    for line in data.decode("utf-8", "replace").splitlines():
        tokens = _WHITESPACE.sub(" ", line).strip().split(" ")
        if len(tokens) == 2 and len(tokens[0]) == HashKind.MD5.hex_length:
            sums[strip_dot_slash(tokens[1])] = tokens[0]
        elif line.strip():
            logger.printf("Skipping malformed md5sums line: {0!r}", line)

    return sums


class ChecksumSet(object):
    """Per-file checksum stores of a single package.

    The stores are only written while the package is being read and are
    exposed as read-only mappings afterwards.
    """

    def __init__(self, kind):
        """Initialize empty stores for calculated checksums of kind."""
        super(ChecksumSet, self).__init__()
        self.kind = kind
        self._declared = OrderedDict()
        self._calculated = OrderedDict()
        self._recomputed = OrderedDict()

    def add_declared(self, sums):
        """Record the contents of an md5sums file."""
        self._declared.update(sums)

    def add_calculated(self, path, content):
        """Hash content with the configured algorithm and record it."""
        self._calculated[path] = digest(content, self.kind)

    def add_recomputed_md5(self, path, content):
        """Record the MD5 of content for comparison with md5sums."""
        key = strip_dot_slash(path)
        if self.kind is HashKind.MD5 and path in self._calculated:
            self._recomputed[key] = self._calculated[path]
        else:
            self._recomputed[key] = digest(content, HashKind.MD5)

    def declared(self, path):
        """Return the declared MD5 of path, or an empty string."""
        return self._declared.get(strip_dot_slash(path), "")

    def calculated(self, path):
        """Return the calculated checksum of path, or an empty string.

        path must be spelled the way it appears in data.tar, which is
        usually with a leading "./".
        """
        return self._calculated.get(path, "")

    def declared_items(self):
        """Return a read-only view of the declared store."""
        return MappingProxyType(self._declared)

    def calculated_items(self):
        """Return a read-only view of the calculated store."""
        return MappingProxyType(self._calculated)

    def mismatches(self):
        """Return (path, declared, actual) for files that changed."""
        return [(path, declared, self._recomputed[path])
                for path, declared in self._declared.items()
                if path in self._recomputed and
                self._recomputed[path] != declared]

    def __eq__(self, other):
        """Checksum sets are equal when their stores are equal."""
        if not isinstance(other, ChecksumSet):
            return NotImplemented

        return (self.kind is other.kind and
                self._declared == other._declared and
                self._calculated == other._calculated and
                self._recomputed == other._recomputed)

    def __ne__(self, other):
        """Inverse of __eq__."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result

        return not result

    __hash__ = None


class Checksum(object):
    """Lazily computed checksums of a whole package file.

    The checksums are read from path, or from payload if the package
    was read from memory. Each kind is computed at most once.
    """

    def __init__(self, path=None, payload=None):
        """Initialize with the package's path or raw bytes."""
        super(Checksum, self).__init__()
        self._path = path
        self._payload = payload
        self._sums = {}
        self._lock = threading.Lock()

    def _compute(self, kind):
        hasher = kind.new()
        if self._payload is not None:
            hasher.update(self._payload)
        elif self._path is None:
            raise PackageIOError("<unknown>", "No path has been defined")
        else:
            try:
                with open(self._path, "rb") as package:
                    for chunk in iter(lambda: package.read(_READ_CHUNK_SIZE),
                                      b""):
                        hasher.update(chunk)
            except OSError as error:
                raise PackageIOError(self._path, str(error)) from error

        return hasher.hexdigest()

    def sum(self, kind):
        """Return the hex digest of the package for kind."""
        kind = hash_kind(kind)
        with self._lock:
            if kind not in self._sums:
                self._sums[kind] = self._compute(kind)

            return self._sums[kind]

    def md5(self):
        """MD5 of the package."""
        return self.sum(HashKind.MD5)

    def sha1(self):
        """SHA1 of the package."""
        return self.sum(HashKind.SHA1)

    def sha256(self):
        """SHA256 of the package."""
        return self.sum(HashKind.SHA256)
