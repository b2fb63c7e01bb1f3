"""Installed adminbro version, read from package metadata."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("adminbro")
except PackageNotFoundError:
    __version__ = "0.0.0"

VERSION = __version__
