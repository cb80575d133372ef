# /debpkginfo/logger.py
#
# Diagnostic sinks handed to the package reader.
#
# See /LICENCE.md for Copyright information
"""Diagnostic sinks handed to the package reader.

A sink only needs printf, println and print. The reader never makes
decisions based on what it logs.
"""

import logging


class LoggerLike(object):
    """Interface of a diagnostic sink."""

    def printf(self, fmt, *args):
        """Log a message formatted with str.format."""
        raise NotImplementedError()

    def println(self, *args):
        """Log args separated by spaces."""
        raise NotImplementedError()

    def print(self, *args):
        """Log args concatenated together."""
        raise NotImplementedError()


class StandardLogger(LoggerLike):
    """Sink forwarding to the logging module at DEBUG level."""

    def __init__(self, name="debpkginfo"):
        """Initialize the logging.Logger we forward to."""
        super(StandardLogger, self).__init__()
        self._logger = logging.getLogger(name)

    def printf(self, fmt, *args):
        """Log a message formatted with str.format."""
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(fmt.format(*args))

    def println(self, *args):
        """Log args separated by spaces."""
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(" ".join(str(a) for a in args))

    def print(self, *args):
        """Log args concatenated together."""
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("".join(str(a) for a in args))


class NullLogger(LoggerLike):
    """Sink which discards everything."""

    def printf(self, fmt, *args):
        """Discard a formatted message."""
        del fmt
        del args

    def println(self, *args):
        """Discard args."""
        del args

    def print(self, *args):
        """Discard args."""
        del args
