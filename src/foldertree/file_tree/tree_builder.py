"""Recursive construction of FileNode trees from the filesystem.

This module provides the FileTreeBuilder class, which turns a path into a fully
materialized FileNode tree while skipping excluded entries, and the
build_file_tree() convenience function.

Error Handling:
    Failures are split by where they happen:
    - Reading the metadata of the root path, or listing any directory, raises the
      underlying OSError and aborts that (sub)tree.
    - Any OSError while building a single child is logged and the child is dropped;
      its siblings and ancestors are unaffected.
"""

import logging
import os
import stat
from pathlib import PurePath
from typing import List, Optional

from foldertree.exceptions import TreeDepthError
from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.exclusion_rules.name_rules import NameExclusionRules
from foldertree.file_tree.file_node import FileNode
from foldertree.types import PathType

logger = logging.getLogger(__name__)

# Levels below the root; keeps recursion clear of the interpreter's recursion limit
DEFAULT_MAX_DEPTH = 256


class FileTreeBuilder:
    """Builds FileNode trees for filesystem paths.

    A builder holds only configuration, so one instance can serve any number of
    requests. Each call to build() walks the filesystem afresh, depth-first, and
    returns a tree owned entirely by the caller.

    Children appear in the order the operating system lists them; they are not sorted.
    Symbolic links are followed, so a link to a directory becomes a directory node and
    a dangling link is dropped as a failed child.

    Attributes:
        exclusion_rules (BaseExclusionRules): Rules deciding which entry names to skip.
        max_depth (Optional[int]): How many levels below the root may be built. Deeper
            entries fail with TreeDepthError and are dropped like any failed child.
            None means no limit.

    Example:
        >>> builder = FileTreeBuilder()  # doctest: +SKIP
        >>> tree = builder.build("/proj")  # doctest: +SKIP
        >>> sorted(child.name for child in tree.children)  # doctest: +SKIP
        ['a.txt', 'src']
    """

    def __init__(
        self,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Initialize a FileTreeBuilder.

        Args:
            exclusion_rules: Rules for skipping entries. Defaults to NameExclusionRules
                with DEFAULT_EXCLUDED_PATTERNS (hidden entries, node_modules, target).
            max_depth: Depth limit below the root. Defaults to DEFAULT_MAX_DEPTH.

        Raises:
            ValueError: If max_depth is negative.
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.exclusion_rules = exclusion_rules if exclusion_rules is not None else NameExclusionRules()
        self.max_depth = max_depth

    def build(self, path: PathType) -> FileNode:
        """Build the tree rooted at a path.

        Args:
            path: File or directory to describe. May be absolute or relative.

        Returns:
            The root FileNode. For a directory, every non-excluded descendant that could
            be read is included.

        Raises:
            FileNotFoundError: If the path does not exist.
            PermissionError: If the path's metadata or a directory listing is not accessible.
            OSError: For any other failure reading the root or listing a directory.
        """
        logger.debug("Building file tree for %s", path)
        return self._build_node(os.fspath(path), 0)

    def _build_node(self, path: str, depth: int) -> FileNode:
        if self.max_depth is not None and depth > self.max_depth:
            raise TreeDepthError(path, self.max_depth)

        metadata = os.stat(path)
        is_directory = stat.S_ISDIR(metadata.st_mode)
        if not is_directory:
            return FileNode(name=_entry_name(path), path=_as_text(path), is_directory=False)

        children: List[FileNode] = []
        for child_path in self._list_children(path):
            try:
                children.append(self._build_node(child_path, depth + 1))
            except OSError as e:
                logger.warning("Error processing %s: %s", _as_text(child_path), e)
        return FileNode(name=_entry_name(path), path=_as_text(path), is_directory=True, children=children)

    def _list_children(self, path: str) -> List[str]:
        """Return the paths of the non-excluded entries of a directory.

        The directory handle is closed before any child is visited.
        """
        with os.scandir(path) as entries:
            return [entry.path for entry in entries if not self.exclusion_rules.exclude(entry.name)]


def _entry_name(path: str) -> str:
    """Return the final component of a path, or "" when there is none.

    Example:
        >>> _entry_name("/proj/src/")
        'src'
        >>> _entry_name("/")
        ''
        >>> _entry_name("..")
        ''
    """
    name = PurePath(path).name
    return "" if name == ".." else _as_text(name)


def _as_text(path: str) -> str:
    """Return a path as valid Unicode text, replacing undecodable bytes with U+FFFD.

    Names that are not valid UTF-8 reach Python as strings with lone surrogates, which
    cannot be encoded for the host. The original string is still used for filesystem access.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def build_file_tree(
    path: PathType,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> FileNode:
    """Build the FileNode tree for a path with a one-off builder.

    Args:
        path: File or directory to describe.
        exclusion_rules: Rules for skipping entries. Defaults to the standard skip list.
        max_depth: Depth limit below the root. Defaults to DEFAULT_MAX_DEPTH.

    Returns:
        The root FileNode.

    Raises:
        OSError: If the root cannot be read or a directory cannot be listed.
    """
    return FileTreeBuilder(exclusion_rules, max_depth).build(path)
