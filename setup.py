# /setup.py
#
# Installation and setup script for debpkginfo
#
# See /LICENCE.md for Copyright information
"""Installation and setup script for debpkginfo."""

from setuptools import find_packages, setup

setup(name="debpkginfo",
      version="0.1.0",
      description="""Read metadata out of Debian binary packages""",
      long_description="""Extracts control fields, maintainer scripts, """
                       """file lists and checksums from .deb and .ipk """
                       """packages without dpkg.""",
      classifiers=["Development Status :: 3 - Alpha",
                   "Intended Audience :: Developers",
                   "Topic :: Software Development :: Build Tools",
                   "Topic :: System :: Archiving :: Packaging",
                   "License :: OSI Approved :: MIT License",
                   "Programming Language :: Python :: 3"],
      license="MIT",
      keywords="debian deb ipk package checksum",
      packages=find_packages(exclude=["tests"]),
      python_requires=">=3.6",
      install_requires=["clint",
                        "configargparse",
                        "python-debian",
                        "requests"],
      extras_require={
          "test": [
              "pytest",
              "tempdir",
              "testtools"
          ]
      },
      entry_points={
          "console_scripts": [
              "debpkginfo-describe=debpkginfo.describe:main"
          ]
      },
      zip_safe=True,
      include_package_data=True)
