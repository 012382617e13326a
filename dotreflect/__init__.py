"""dotreflect - Dotted-path reflection over Python object graphs."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dotreflect")
except PackageNotFoundError:
    __version__ = "(local)"
