# /debpkginfo/package.py
#
# The result of reading a package.
#
# See /LICENCE.md for Copyright information
"""The result of reading a package.

A PackageFile is built in one pass by debpkginfo.reader and never changes
afterwards, so it can be shared between threads freely. The only state
filled in later is the lazily computed checksum of the package itself.
"""

from collections import namedtuple

from debpkginfo.checksum import Checksum, ChecksumSet
from debpkginfo.control import ControlFile
from debpkginfo.descriptors import (ConffilesList,
                                    SharedLibsTable,
                                    SymbolsTable,
                                    TriggersTable)


class ScriptBundle(namedtuple("ScriptBundle",
                              "preinst postinst prerm postrm config")):
    """Maintainer scripts. Scripts the package does not ship are empty."""

    __slots__ = ()


ScriptBundle.__new__.__defaults__ = ("", "", "", "", "")


class PackageFile(object):  # pylint:disable=too-many-instance-attributes
    """Metadata, scripts, contents and checksums of a Debian package."""

    def __init__(self, **kwargs):
        """Initialize from the values gathered by the reader."""
        super(PackageFile, self).__init__()
        self._path = kwargs.get("path", "")
        self._file_size = kwargs.get("file_size")
        self._file_time = kwargs.get("file_time")
        self._deb_version = kwargs.get("deb_version", "")
        self._gpgbuilder = kwargs.get("gpgbuilder", "")
        self._scripts = kwargs.get("scripts", ScriptBundle())
        self._templates = kwargs.get("templates", "")
        self._control = kwargs.get("control", ControlFile())
        self._symbols = kwargs.get("symbols", SymbolsTable())
        self._shlibs = kwargs.get("shlibs", SharedLibsTable())
        self._triggers = kwargs.get("triggers", TriggersTable())
        self._conffiles = kwargs.get("conffiles", ConffilesList())
        self._files = tuple(kwargs.get("files", ()))
        self._checksums = kwargs["checksums"]
        self._checksum = kwargs.get("checksum") or Checksum(path=self._path)
        self._by_path = {record.path: record for record in self._files}

    def path(self):
        """Path or URL the package was opened from."""
        return self._path

    def file_size(self):
        """Size of the package in bytes, if known."""
        return self._file_size

    def file_time(self):
        """Last modification time of the package, if known."""
        return self._file_time

    def deb_version(self):
        """Version of the package format, from debian-binary."""
        return self._deb_version

    def gpgbuilder(self):
        """Contents of the _gpgbuilder member, if any."""
        return self._gpgbuilder

    def scripts(self):
        """All maintainer scripts as a ScriptBundle."""
        return self._scripts

    def pre_install_script(self):
        """The preinst script."""
        return self._scripts.preinst

    def post_install_script(self):
        """The postinst script."""
        return self._scripts.postinst

    def pre_uninstall_script(self):
        """The prerm script."""
        return self._scripts.prerm

    def post_uninstall_script(self):
        """The postrm script."""
        return self._scripts.postrm

    def templates(self):
        """Raw debconf templates."""
        return self._templates

    def control_file(self):
        """Parsed control file."""
        return self._control

    def symbols_file(self):
        """Parsed symbols file as a SymbolsTable."""
        return self._symbols

    def shared_libs_file(self):
        """Parsed shlibs file as a SharedLibsTable."""
        return self._shlibs

    def triggers_file(self):
        """Parsed triggers file as a TriggersTable."""
        return self._triggers

    def conffiles_file(self):
        """Parsed conffiles file as a ConffilesList."""
        return self._conffiles

    def files(self):
        """FileRecords in data.tar order.

        A path that occurs more than once in data.tar occurs more than
        once here too.
        """
        return self._files

    def file(self, path):
        """Return the FileRecord for path, or None.

        If path occurs more than once, the last entry wins.
        """
        return self._by_path.get(path)

    def hash_kind(self):
        """HashKind used for calculated checksums."""
        return self._checksums.kind

    def checksums(self):
        """The ChecksumSet of this package."""
        return self._checksums

    def get_file_md5sums(self, path):
        """Return the MD5 of path from md5sums, or an empty string.

        md5sums usually leaves out conffiles.
        """
        return self._checksums.declared(path)

    def get_file_checksum(self, path):
        """Return the calculated checksum of path, or an empty string."""
        return self._checksums.calculated(path)

    def get_package_checksum(self):
        """Return the lazily computed Checksum of the package itself."""
        return self._checksum

    def mismatched_checksums(self):
        """Return (path, declared, actual) for files not matching md5sums.

        Empty unless the package was read with recalculate_checksums and
        without meta_only.
        """
        return self._checksums.mismatches()

    def _key(self):
        return (self._path, self._file_size, self._file_time,
                self._deb_version, self._gpgbuilder, self._scripts,
                self._templates, self._control, self._files, self._checksums)

    def __eq__(self, other):
        """Packages are equal when everything read from them is equal."""
        if not isinstance(other, PackageFile):
            return NotImplemented

        return self._key() == other._key()

    def __ne__(self, other):
        """Packages differ when anything read from them differs."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result

        return not result

    __hash__ = None

    def __repr__(self):
        """Show the package name, version and path."""
        return "PackageFile({0!r}, {1} {2})".format(self._path,
                                                    self._control.get(
                                                        "Package"),
                                                    self._control.get(
                                                        "Version"))
