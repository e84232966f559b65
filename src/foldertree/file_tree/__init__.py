"""File tree representation with configurable exclusion rules.

This module provides the FileNode record and the builder that turns a directory
into a fully materialized tree of FileNodes.
"""

from .file_node import FileNode
from .tree_builder import DEFAULT_MAX_DEPTH, FileTreeBuilder, build_file_tree

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "FileNode",
    "FileTreeBuilder",
    "build_file_tree",
]
