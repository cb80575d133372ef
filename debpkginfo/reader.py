# /debpkginfo/reader.py
#
# Read a package's ar members and assemble a PackageFile.
#
# See /LICENCE.md for Copyright information
"""Read a package's ar members and assemble a PackageFile.

Members are handled in the order they appear in the ar archive. Some
packagers (Yocto's IPKs for instance) put a directory in front of member
names, so only the last path segment of a name is looked at.
"""

import enum

import io

import posixpath

from debian import arfile  # suppress(import-error)

from debpkginfo import codec
from debpkginfo import contents

from debpkginfo.checksum import Checksum, ChecksumSet, parse_md5sums
from debpkginfo.control import parse_control
from debpkginfo.descriptors import (ConffilesList,
                                    SharedLibsTable,
                                    SymbolsTable,
                                    TriggersTable)
from debpkginfo.errors import FormatViolation
from debpkginfo.options import DEFAULT_OPTIONS
from debpkginfo.package import PackageFile, ScriptBundle

DEBIAN_BINARY = "debian-binary"
GPG_BUILDER = "_gpgbuilder"


class MemberRole(enum.Enum):
    """What an ar member of a package holds."""

    CONTROL = "control"
    DATA = "data"
    GPG_BUILDER = "gpgbuilder"
    DEBIAN_BINARY = "debian-binary"
    UNRECOGNIZED = "unrecognized"


def normalize_member_name(name):
    """Return the last path segment of an ar member name."""
    return posixpath.basename(name.rstrip("/"))


def classify_member(name):
    """Return the MemberRole of a normalized member name."""
    if name.startswith("control."):
        return MemberRole.CONTROL
    elif name.startswith("data."):
        return MemberRole.DATA
    elif name == GPG_BUILDER:
        return MemberRole.GPG_BUILDER
    elif name == DEBIAN_BINARY:
        return MemberRole.DEBIAN_BINARY

    return MemberRole.UNRECOGNIZED


class _PackageBuilder(object):  # pylint:disable=too-many-instance-attributes
    """Values gathered for a PackageFile while its members are read."""

    def __init__(self, kind):
        """Initialize empty values, hashing with kind."""
        super(_PackageBuilder, self).__init__()
        self.deb_version = ""
        self.gpgbuilder = ""
        self.scripts = {}
        self.templates = ""
        self.control = None
        self.symbols = None
        self.shlibs = None
        self.triggers = None
        self.conffiles = None
        self.files = []
        self.checksums = ChecksumSet(kind)

    def build(self, **kwargs):
        """Return the finished PackageFile."""
        optional = {
            "control": self.control,
            "symbols": self.symbols,
            "shlibs": self.shlibs,
            "triggers": self.triggers,
            "conffiles": self.conffiles
        }
        kwargs.update({k: v for k, v in optional.items() if v is not None})
        return PackageFile(deb_version=self.deb_version,
                           gpgbuilder=self.gpgbuilder,
                           scripts=ScriptBundle(**self.scripts),
                           templates=self.templates,
                           files=self.files,
                           checksums=self.checksums,
                           **kwargs)


def _text(data):
    return data.decode("utf-8", "replace")


class PackageReader(object):
    """Reads one package from a seekable binary file object."""

    def __init__(self, fileobj, options=DEFAULT_OPTIONS):
        """Initialize with the file object to read and PackageOptions."""
        super(PackageReader, self).__init__()
        self._fileobj = fileobj
        self._options = options
        self._logger = options.logger

    def _members(self):
        """Yield (name, payload) for each ar member, in archive order."""
        try:
            archive = arfile.ArFile(fileobj=self._fileobj)
            for member in archive.getmembers():
                member.seek(0)
                yield member.name, member.read()
        except (arfile.ArError, IOError, ValueError) as error:
            raise FormatViolation("""Cannot read ar archive: """
                                  """{0}""".format(error)) from error

    def _process_debian_binary(self, builder, name, payload):
        del name

        builder.deb_version = _text(payload).strip()

    def _process_gpgbuilder(self, builder, name, payload):
        del name

        builder.gpgbuilder = _text(payload).strip()

    def _process_unrecognized(self, builder, name, payload):
        del builder
        del payload

        self._logger.printf("Ignoring unrecognized member {0}", name)

    def _process_data(self, builder, name, payload):
        """Record every entry of data.tar and checksum regular files."""
        options = self._options
        payload = codec.decompress(payload, name)
        for record, content in contents.walk(payload,
                                             name,
                                             not options.meta_only):
            builder.files.append(record)
            if content is None:
                continue

            builder.checksums.add_calculated(record.path, content)
            if options.recalculate_checksums:
                builder.checksums.add_recomputed_md5(record.path, content)

    def _process_control(self, builder, name, payload):
        """Dispatch each file in control.tar to its handler."""
        handlers = {
            "preinst": self._control_script,
            "postinst": self._control_script,
            "prerm": self._control_script,
            "postrm": self._control_script,
            "config": self._control_script,
            "md5sums": self._control_md5sums,
            "control": self._control_control,
            "templates": self._control_templates,
            "symbols": self._control_descriptor,
            "shlibs": self._control_descriptor,
            "triggers": self._control_descriptor,
            "conffiles": self._control_descriptor
        }

        payload = codec.decompress(payload, name)
        for entry, content in contents.read_members(payload, name):
            handler = handlers.get(entry)
            if handler is None:
                self._logger.printf("Ignoring control file {0} in {1}",
                                    entry,
                                    name)
                continue

            handler(builder, entry, content)

    def _control_script(self, builder, entry, content):
        builder.scripts[entry] = _text(content)

    def _control_md5sums(self, builder, entry, content):
        del entry

        builder.checksums.add_declared(parse_md5sums(content, self._logger))

    def _control_control(self, builder, entry, content):
        del entry

        builder.control = parse_control(content, self._logger)

    def _control_templates(self, builder, entry, content):
        del entry

        builder.templates = _text(content)

    def _control_descriptor(self, builder, entry, content):
        """Hand symbols, shlibs, triggers and conffiles to their tables."""
        table = {
            "symbols": SymbolsTable,
            "shlibs": SharedLibsTable,
            "triggers": TriggersTable,
            "conffiles": ConffilesList
        }[entry]
        setattr(builder, entry, table.from_bytes(content, self._logger))

    def read(self, path="", file_size=None, file_time=None, payload=None):
        """Read the whole package and return a PackageFile.

        path, file_size and file_time describe where the package came
        from. If payload is given, the checksum of the package is
        computed from it instead of re-reading path. Any failure raises
        a PackageError and no PackageFile is returned.
        """
        process = {
            MemberRole.CONTROL: self._process_control,
            MemberRole.DATA: self._process_data,
            MemberRole.GPG_BUILDER: self._process_gpgbuilder,
            MemberRole.DEBIAN_BINARY: self._process_debian_binary,
            MemberRole.UNRECOGNIZED: self._process_unrecognized
        }

        builder = _PackageBuilder(self._options.hash)
        for name, member_payload in self._members():
            name = normalize_member_name(name)
            process[classify_member(name)](builder, name, member_payload)

        if payload is not None:
            checksum = Checksum(payload=payload)
        else:
            checksum = Checksum(path=path)

        return builder.build(path=path,
                             file_size=file_size,
                             file_time=file_time,
                             checksum=checksum)


def read_package_bytes(data, options=DEFAULT_OPTIONS, path=""):
    """Read a package held in memory."""
    return PackageReader(io.BytesIO(data), options).read(path=path,
                                                         file_size=len(data),
                                                         payload=data)
