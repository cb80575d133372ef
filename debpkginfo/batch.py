# /debpkginfo/batch.py
#
# Read many packages at once.
#
# See /LICENCE.md for Copyright information
"""Read many packages at once.

Reads share no state, so each package is read on its own worker. A
package that fails to read is reported in its BatchResult and does not
stop the others.
"""

from collections import namedtuple

from concurrent.futures import ThreadPoolExecutor

from debpkginfo.acquire import open_package_file
from debpkginfo.errors import PackageError
from debpkginfo.options import DEFAULT_OPTIONS


class BatchResult(namedtuple("BatchResult", "uri package error")):
    """Outcome of reading one package; exactly one of package or error."""

    __slots__ = ()

    def ok(self):
        """Return true if the package was read."""
        return self.error is None


def _read_one(uri, options):
    try:
        return BatchResult(uri, open_package_file(uri, options), None)
    except PackageError as error:
        options.logger.printf("Failed to read {0}: {1}", uri, error)
        return BatchResult(uri, None, error)


def read_packages(uris, options=DEFAULT_OPTIONS, jobs=1):
    """Read each of uris and yield BatchResults in the same order."""
    with ThreadPoolExecutor(max_workers=max(1, jobs)) as executor:
        for result in executor.map(lambda uri: _read_one(uri, options),
                                   uris):
            yield result
