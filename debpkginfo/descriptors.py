# /debpkginfo/descriptors.py
#
# Tables for the conffiles, triggers, shlibs and symbols control files.
#
# See /LICENCE.md for Copyright information
"""Tables for the conffiles, triggers, shlibs and symbols control files.

Each table is built once from the raw bytes of its control file and only
offers queries afterwards.
"""

from collections import OrderedDict, namedtuple


def _lines(data):
    """Yield stripped-right lines of data, skipping comments and blanks."""
    if isinstance(data, bytes):
        data = data.decode("utf-8", "replace")

    for line in data.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue

        yield line.rstrip()


class ConffilesList(object):
    """Configuration files listed in conffiles.

    Newer dpkg allows flags such as remove-on-upgrade in front of the path.
    """

    def __init__(self, entries=()):
        """Initialize from (path, flags) pairs."""
        super(ConffilesList, self).__init__()
        self._entries = OrderedDict(entries)

    @classmethod
    def from_bytes(cls, data, logger):
        """Parse the conffiles file."""
        entries = []
        for line in _lines(data):
            tokens = line.split()
            if not tokens[-1].startswith("/"):
                logger.printf("Skipping conffiles line without an absolute "
                              "path: {0!r}", line)
                continue

            entries.append((tokens[-1], tuple(tokens[:-1])))

        return cls(entries)

    def paths(self):
        """Return conffile paths in order."""
        return list(self._entries.keys())

    def flags(self, path):
        """Return the flags set for path."""
        return self._entries.get(path, ())

    def __contains__(self, path):
        """Return true if path is a conffile."""
        return path in self._entries

    def __iter__(self):
        """Iterate over conffile paths in order."""
        return iter(self._entries)

    def __len__(self):
        """Return the number of conffiles."""
        return len(self._entries)


class TriggersTable(object):
    """Trigger directives from the triggers file."""

    def __init__(self, directives=()):
        """Initialize from (directive, name) pairs."""
        super(TriggersTable, self).__init__()
        self._directives = tuple(directives)

    @classmethod
    def from_bytes(cls, data, logger):
        """Parse the triggers file."""
        directives = []
        for line in _lines(data):
            tokens = line.split()
            if len(tokens) != 2:
                logger.printf("Skipping malformed triggers line: {0!r}", line)
                continue

            directives.append((tokens[0], tokens[1]))

        return cls(directives)

    def directives(self):
        """Return (directive, trigger name) pairs in order."""
        return list(self._directives)

    def interests(self):
        """Return names of triggers this package is interested in."""
        return [name for directive, name in self._directives
                if directive.startswith("interest")]

    def activations(self):
        """Return names of triggers this package activates."""
        return [name for directive, name in self._directives
                if directive.startswith("activate")]

    def __len__(self):
        """Return the number of trigger directives."""
        return len(self._directives)


SharedLib = namedtuple("SharedLib", "type library version dependencies")


class SharedLibsTable(object):
    """Entries of the shlibs file."""

    def __init__(self, entries=()):
        """Initialize from SharedLib entries."""
        super(SharedLibsTable, self).__init__()
        self._entries = tuple(entries)

    @classmethod
    def from_bytes(cls, data, logger):
        """Parse the shlibs file.

        Lines read "[type:] library version dependencies", where the
        dependencies run to the end of the line.
        """
        entries = []
        for line in _lines(data):
            lib_type = ""
            tokens = line.split(None, 1)
            if tokens[0].endswith(":"):
                lib_type = tokens[0][:-1]
                line = tokens[1] if len(tokens) > 1 else ""

            tokens = line.split(None, 2)
            if len(tokens) < 2:
                logger.printf("Skipping malformed shlibs line: {0!r}", line)
                continue

            entries.append(SharedLib(type=lib_type,
                                     library=tokens[0],
                                     version=tokens[1],
                                     dependencies=(tokens[2] if
                                                   len(tokens) > 2 else "")))

        return cls(entries)

    def entries(self):
        """Return all entries in order."""
        return list(self._entries)

    def lookup(self, library, version=None):
        """Return entries for library, optionally of one soname version."""
        return [entry for entry in self._entries
                if entry.library == library and
                (version is None or entry.version == version)]

    def __len__(self):
        """Return the number of shared library entries."""
        return len(self._entries)


class _SymbolsBlock(object):  # pylint:disable=R0903
    """Mutable accumulator for one library while parsing."""

    def __init__(self, dependency):
        """Initialize a block for a library providing dependency."""
        super(_SymbolsBlock, self).__init__()
        self.dependency = dependency
        self.alternatives = []
        self.metadata = OrderedDict()
        self.symbols = OrderedDict()


class SymbolsTable(object):
    """Exported symbols per library from the symbols file."""

    def __init__(self, blocks=None):
        """Initialize from an ordered library to _SymbolsBlock mapping."""
        super(SymbolsTable, self).__init__()
        self._blocks = blocks or OrderedDict()

    @classmethod
    def from_bytes(cls, data, logger):
        """Parse the symbols file.

        A block starts with "soname dependency-template" and is followed
        by symbol lines starting with whitespace, "| alternative"
        dependency lines and "* Field: value" metadata lines.
        """
        blocks = OrderedDict()
        current = None
        for line in _lines(data):
            if line.startswith((" ", "\t")):
                if current is None:
                    logger.printf("Skipping symbol outside of a library: "
                                  "{0!r}", line)
                    continue

                tokens = line.split()
                current.symbols[tokens[0]] = (tokens[1] if
                                              len(tokens) > 1 else "")
            elif line.startswith("|"):
                if current is not None:
                    current.alternatives.append(line[1:].strip())
            elif line.startswith("*"):
                name, _, value = line[1:].partition(":")
                if current is not None:
                    current.metadata[name.strip()] = value.strip()
            else:
                library, _, dependency = line.partition(" ")
                current = _SymbolsBlock(dependency.strip())
                blocks[library] = current

        return cls(blocks)

    def libraries(self):
        """Return the sonames described, in order."""
        return list(self._blocks.keys())

    def symbols(self, library):
        """Return an ordered symbol to minimal version mapping."""
        block = self._blocks.get(library)
        return OrderedDict(block.symbols) if block else OrderedDict()

    def dependency(self, library):
        """Return the main dependency template of library."""
        block = self._blocks.get(library)
        return block.dependency if block else ""

    def alternative_dependencies(self, library):
        """Return alternative dependency templates of library."""
        block = self._blocks.get(library)
        return list(block.alternatives) if block else []

    def metadata(self, library):
        """Return the "* Field: value" metadata of library."""
        block = self._blocks.get(library)
        return OrderedDict(block.metadata) if block else OrderedDict()

    def __len__(self):
        """Return the number of libraries."""
        return len(self._blocks)
