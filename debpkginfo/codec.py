# /debpkginfo/codec.py
#
# Decompression of control.tar.* and data.tar.* members.
#
# See /LICENCE.md for Copyright information
"""Decompression of control.tar.* and data.tar.* members."""

import bz2

import enum

import gzip

import lzma

import zlib

from debpkginfo.errors import FormatViolation, UnsupportedCompression


class Codec(enum.Enum):
    """Compression formats dpkg-deb can produce members in."""

    NONE = ".tar"
    GZIP = ".gz"
    XZ = ".xz"
    BZIP2 = ".bz2"
    LZMA = ".lzma"


def codec_for_member(name):
    """Return the Codec for member name, judging by its suffix."""
    for codec in (Codec.GZIP, Codec.XZ, Codec.BZIP2, Codec.LZMA, Codec.NONE):
        if name.endswith(codec.value):
            return codec

    raise UnsupportedCompression("""Unsupported compression, expected """
                                 """one of {0}""".format(", ".join(c.value for
                                                                   c in Codec)),
                                 member=name)


def _decode_none(data):
    return data


def _decode_gzip(data):
    return gzip.decompress(data)


def _decode_xz(data):
    return lzma.decompress(data, format=lzma.FORMAT_XZ)


def _decode_bzip2(data):
    return bz2.decompress(data)


def _decode_lzma(data):
    """Decode the legacy .lzma ("alone") format, not xz."""
    return lzma.decompress(data, format=lzma.FORMAT_ALONE)


_DECODERS = {
    Codec.NONE: _decode_none,
    Codec.GZIP: _decode_gzip,
    Codec.XZ: _decode_xz,
    Codec.BZIP2: _decode_bzip2,
    Codec.LZMA: _decode_lzma
}


def decompress(data, name):
    """Decompress the payload of member name.

    Corrupt or truncated streams raise FormatViolation.
    """
    codec = codec_for_member(name)
    try:
        return _DECODERS[codec](data)
    except (OSError, EOFError, ValueError, lzma.LZMAError, zlib.error) as err:
        raise FormatViolation("""Cannot decompress {0} stream: """
                              """{1}""".format(codec.name.lower(), err),
                              member=name) from err
