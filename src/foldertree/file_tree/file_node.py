"""Node representation for file system entries in the tree."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional


@dataclass
class FileNode:
    """Record describing one file or directory and, for directories, its children.

    A FileNode owns its children by value, so a built tree is fully materialized and
    needs no further filesystem access. ``children`` is a list (possibly empty) for
    directories and None for everything else.

    Attributes:
        name (str): The final path component, or "" if the path has none.
        path (str): The full path of the entry as text.
        is_directory (bool): True if the entry was a directory when it was visited.
        children (Optional[List[FileNode]]): Child nodes for a directory, None for a file.

    Example:
        >>> root = FileNode("proj", "/proj", is_directory=True, children=[])
        >>> root.children.append(FileNode("a.txt", "/proj/a.txt"))
        >>> root.to_dict()["children"][0]
        {'name': 'a.txt', 'path': '/proj/a.txt', 'is_directory': False, 'children': None}
    """

    name: str
    path: str
    is_directory: bool = False
    children: Optional[List["FileNode"]] = None

    def __post_init__(self) -> None:
        if self.is_directory and self.children is None:
            self.children = []
        elif not self.is_directory and self.children is not None:
            raise ValueError(f"File node {self.path!r} cannot have children")

    def walk(self) -> Iterator["FileNode"]:
        """Iterate over this node and all of its descendants in pre-order.

        Yields:
            Each node of the subtree, parents before their children.

        Example:
            >>> tree = FileNode("p", "p", True, [FileNode("s", "p/s", True, [FileNode("b", "p/s/b")])])
            >>> [node.path for node in tree.walk()]
            ['p', 'p/s', 'p/s/b']
        """
        yield self
        for child in self.children or ():
            yield from child.walk()

    def find(self, path: str) -> Optional["FileNode"]:
        """Return the node with the given path in this subtree, or None."""
        return next((node for node in self.walk() if node.path == path), None)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the subtree into plain dictionaries ready for serialization.

        Returns:
            A dictionary with the keys ``name``, ``path``, ``is_directory`` and
            ``children``, where ``children`` is a list of dictionaries of the same shape
            for a directory and None for a file.
        """
        return {
            "name": self.name,
            "path": self.path,
            "is_directory": self.is_directory,
            "children": None if self.children is None else [child.to_dict() for child in self.children],
        }

    def to_json(self, **kwargs: Any) -> str:
        """Serialize the subtree as a JSON string.

        Args:
            **kwargs: Extra arguments passed to json.dumps (e.g. ``indent``).

        Returns:
            The JSON text of to_dict().
        """
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileNode":
        """Rebuild a node and its subtree from the shape produced by to_dict().

        A missing ``children`` key is treated the same as None.

        Args:
            data: Dictionary with ``name``, ``path``, ``is_directory`` and optionally
                ``children``.

        Returns:
            The reconstructed FileNode.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If a non-directory entry carries children.
        """
        raw_children = data.get("children")
        children = None if raw_children is None else [cls.from_dict(child) for child in raw_children]
        return cls(
            name=data["name"],
            path=data["path"],
            is_directory=bool(data["is_directory"]),
            children=children,
        )
