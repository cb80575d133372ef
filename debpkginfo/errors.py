# /debpkginfo/errors.py
#
# Exceptions raised while reading a package.
#
# See /LICENCE.md for Copyright information
"""Exceptions raised while reading a package."""


class PackageError(Exception):
    """Base class for every error raised by debpkginfo."""


class ConfigurationError(PackageError, ValueError):
    """Raised when package reading options are invalid."""


class PackageIOError(PackageError, IOError):
    """Raised when a package cannot be opened, stat'ed or fetched.

    Local path failures are not worth retrying, network failures may be.
    """

    def __init__(self, uri, message, retryable=False):
        """Initialize with the uri that failed."""
        super(PackageIOError, self).__init__("{0}: {1}".format(uri, message))
        self.uri = uri
        self.retryable = retryable


class FormatViolation(PackageError):
    """Raised when an archive member cannot be decoded."""

    def __init__(self, message, member=None):
        """Initialize with the outer container member being read."""
        if member is not None:
            message = "{0}: {1}".format(member, message)

        super(FormatViolation, self).__init__(message)
        self.member = member


class UnsupportedCompression(FormatViolation):
    """Raised when a member is compressed with an unknown codec."""
