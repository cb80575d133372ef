# /debpkginfo/__init__.py
#
# Read metadata out of Debian binary packages without dpkg.
#
# See /LICENCE.md for Copyright information
"""Read metadata out of Debian binary packages without dpkg."""
