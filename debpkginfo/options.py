# /debpkginfo/options.py
#
# Options controlling how much of a package gets read.
#
# See /LICENCE.md for Copyright information
"""Options controlling how much of a package gets read."""

from collections import namedtuple

from debpkginfo.checksum import HashKind, hash_kind
from debpkginfo.errors import ConfigurationError
from debpkginfo.logger import LoggerLike, StandardLogger


class PackageOptions(namedtuple("PackageOptions",
                                "meta_only hash recalculate_checksums "
                                "logger")):
    """Immutable options for a single package read.

    meta_only: only read file headers in data.tar, skip hashing content.
    hash: HashKind used for calculated per-file checksums.
    recalculate_checksums: recompute MD5 of every regular file so it can
    be compared against the md5sums shipped with the package.
    logger: LoggerLike receiving diagnostics.
    """

    __slots__ = ()


def package_options(meta_only=False,
                    hash=HashKind.MD5,  # suppress(redefined-builtin)
                    recalculate_checksums=True,
                    logger=None):
    """Return validated PackageOptions.

    An unsupported hash raises ConfigurationError here rather than on
    the first read.
    """
    logger = logger if logger is not None else StandardLogger()
    if not isinstance(logger, LoggerLike):
        for method in ("printf", "println", "print"):
            if not callable(getattr(logger, method, None)):
                raise ConfigurationError("""Logger {0!r} has no {1} """
                                         """method""".format(logger, method))

    return PackageOptions(meta_only=bool(meta_only),
                          hash=hash_kind(hash),
                          recalculate_checksums=bool(recalculate_checksums),
                          logger=logger)


DEFAULT_OPTIONS = package_options()
