# /debpkginfo/describe.py
#
# Command line tool printing what is inside Debian packages.
#
# See /LICENCE.md for Copyright information
"""Command line tool printing what is inside Debian packages."""

import sys

import configargparse

from debpkginfo import batch
from debpkginfo import printer

from debpkginfo.checksum import HashKind
from debpkginfo.errors import ConfigurationError
from debpkginfo.options import package_options


def _parse_arguments(arguments=None):
    """Return parsed command line arguments."""
    parser = configargparse.ArgumentParser(description="""Inspect Debian """
                                                       """packages""")
    parser.add_argument("packages",
                        metavar="PACKAGE",
                        nargs="+",
                        help="""Path or HTTP(S) URL of a .deb or .ipk""")
    parser.add_argument("--meta-only",
                        action="store_true",
                        help="""Only read file headers, don't checksum """
                             """file contents""",
                        env_var="DEBPKGINFO_META_ONLY")
    parser.add_argument("--hash",
                        type=str,
                        default=HashKind.MD5.value,
                        help="""Hash used for calculated file checksums""",
                        env_var="DEBPKGINFO_HASH")
    parser.add_argument("--no-recalculate",
                        action="store_true",
                        help="""Don't compare file contents against the """
                             """package's md5sums""")
    parser.add_argument("--files",
                        action="store_true",
                        help="""List the files in each package""")
    parser.add_argument("--checksums",
                        action="store_true",
                        help="""Show calculated checksums with --files""")
    parser.add_argument("--jobs",
                        type=int,
                        default=1,
                        help="""Number of packages to read at once""",
                        env_var="DEBPKGINFO_JOBS")

    return parser.parse_args(arguments)


def main(arguments=None):
    """Read every package given and print a summary of each.

    Returns 0 if all packages could be read, 1 if some could not and 2
    if the options are invalid.
    """
    result = _parse_arguments(arguments)

    try:
        options = package_options(meta_only=result.meta_only,
                                  hash=result.hash,
                                  recalculate_checksums=not
                                  result.no_recalculate)
    except ConfigurationError as error:
        printer.print_failure("--hash", error)
        return 2

    status = 0
    for read in batch.read_packages(result.packages, options, result.jobs):
        if read.ok():
            printer.print_package(read.package,
                                  show_files=result.files,
                                  show_checksums=result.checksums)
        else:
            printer.print_failure(read.uri, read.error)
            status = 1

    return status

if __name__ == "__main__":
    sys.exit(main())
