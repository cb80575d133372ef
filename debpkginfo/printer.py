# /debpkginfo/printer.py
#
# Print package summaries to a terminal.
#
# See /LICENCE.md for Copyright information
"""Print package summaries to a terminal."""

import platform

import sys

from clint.textui import colored

from debpkginfo.errors import PackageError


def unicode_safe(text, output=None):
    """Write text to output, dropping non-ascii if it can't be shown."""
    output = output or sys.stdout

    # Streams without isatty, and Windows consoles, only get ascii.
    if (not getattr(output, "isatty", None) or
            not output.isatty() or
            platform.system() == "Windows"):
        text = "".join([c for c in str(text) if ord(c) < 128])

    output.write(str(text))


def _field(name, value):
    return " - {0}: {1}\n".format(name, colored.yellow(str(value)))


def _package_checksum_field(package):
    """Return the SHA256 line, or why it could not be computed."""
    try:
        return _field("SHA256", package.get_package_checksum().sha256())
    except PackageError as error:
        return " - SHA256: {0}\n".format(colored.red(str(error)))


def package_summary(package, show_files=False, show_checksums=False):
    """Return a printable summary of a PackageFile."""
    control = package.control_file()
    lines = [
        str(colored.white("{0} {1} ({2})".format(control.get("Package"),
                                                 control.get("Version"),
                                                 control.get("Architecture")),
                          bold=True)) + "\n",
        _field("Path", package.path()),
        _field("Size", package.file_size()),
        _field("Modified", package.file_time()),
        _field("Format", package.deb_version()),
        _package_checksum_field(package)
    ]

    for name, script in zip(package.scripts()._fields, package.scripts()):
        if script:
            lines.append(_field("Script", name))

    for conffile in package.conffiles_file():
        lines.append(_field("Conffile", conffile))

    for path, declared, actual in package.mismatched_checksums():
        lines.append(str(colored.red(""" ! {0} is {1}, md5sums says """
                                     """{2}\n""".format(path,
                                                        actual,
                                                        declared))))

    if show_files:
        for record in package.files():
            line = "   {0:o} {1}/{2} {3:>10} {4}".format(record.mode,
                                                         record.owner,
                                                         record.group,
                                                         record.size,
                                                         record.path)
            if record.linkname:
                line += " -> " + record.linkname

            if show_checksums and package.get_file_checksum(record.path):
                line += "  " + package.get_file_checksum(record.path)

            lines.append(line + "\n")

    return "".join(lines) + "\n"


def print_package(package, show_files=False, show_checksums=False):
    """Print a summary of package."""
    unicode_safe(package_summary(package, show_files, show_checksums))


def print_failure(uri, error):
    """Print that uri could not be read."""
    msg = """\N{ballot x} {0}: {1}\n""".format(uri, error)
    unicode_safe(colored.red(msg, bold=True), output=sys.stderr)
