# /debpkginfo/control.py
#
# Parser for the control file found in control.tar.
#
# See /LICENCE.md for Copyright information
"""Parser for the control file found in control.tar.

Fields use RFC 2822 style folding: a line starting with a space or tab
continues the previous field. Continuation lines are kept verbatim,
leading whitespace included, and joined to the value with a newline, so
"Field: a\\n value2" becomes {"Field": "a\\n value2"}.
"""

from collections import OrderedDict


class ControlFile(object):
    """Fields of a control file, in the order they were first seen.

    Field names are case sensitive.
    """

    def __init__(self, fields=None):
        """Initialize from an iterable of (name, value) pairs."""
        super(ControlFile, self).__init__()
        self._fields = OrderedDict(fields or ())

    def get(self, name, default=""):
        """Return the value of field name, or default if it is absent."""
        return self._fields.get(name, default)

    def names(self):
        """Return field names in order."""
        return list(self._fields.keys())

    def items(self):
        """Return (name, value) pairs in order."""
        return list(self._fields.items())

    def __getitem__(self, name):
        """Return the value of field name, raising KeyError if absent."""
        return self._fields[name]

    def __contains__(self, name):
        """Return true if field name is present."""
        return name in self._fields

    def __iter__(self):
        """Iterate over field names in order."""
        return iter(self._fields)

    def __len__(self):
        """Return the number of fields."""
        return len(self._fields)

    def __eq__(self, other):
        """Control files are equal when their fields are, in order."""
        if not isinstance(other, ControlFile):
            return NotImplemented

        return list(self._fields.items()) == list(other._fields.items())

    def __ne__(self, other):
        """Control files differ when their fields or order differ."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result

        return not result

    __hash__ = None

    def __repr__(self):
        """Show the fields in order."""
        return "ControlFile({0!r})".format(self.items())


def parse_control(data, logger):
    """Fold the lines of a control file and return a ControlFile.

    Comment lines are dropped even where they would continue a field.
    Continuation lines before the first field and field lines without
    a colon are logged and dropped.
    """
    fields = OrderedDict()
    current = None

    if isinstance(data, bytes):
        data = data.decode("utf-8", "replace")

    for line in data.splitlines():
        if line.strip().startswith("#"):
            continue

        if line.startswith((" ", "\t")):
            if current is None:
                logger.printf("Dropping continuation line without a "
                              "field: {0!r}", line)
                continue

            fields[current] += "\n" + line
        elif line.strip():
            name, colon, value = line.partition(":")
            if not colon:
                logger.printf("Dropping control line without a "
                              "colon: {0!r}", line)
                continue

            current = name.strip()
            fields[current] = value.strip()

    return ControlFile(fields.items())
