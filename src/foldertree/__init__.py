"""Directory tree and file access services for desktop application shells.

This package provides the commands a host UI calls to pick a project folder,
read a file's text, and enumerate a directory into a tree of FileNode records.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("foldertree")
except PackageNotFoundError:
    __version__ = "unknown"
