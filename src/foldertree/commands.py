"""Commands exposed to the host application shell.

This module provides the FileCommands facade, the only entry point a host UI needs.
It offers three operations:

    - pick_directory: ask the user for a folder through a native dialog
    - read_text: return a file's complete contents as text
    - get_tree: return the filtered FileNode tree of a path

Each operation delegates to a collaborator and flattens every failure into a
CommandError carrying a readable message. Hosts that talk in messages rather than
Python calls use invoke(), which looks a command up by name and wraps its outcome
in a JSON-ready envelope:

    {"ok": True, "data": ...}        on success
    {"ok": False, "error": "..."}    on failure

Example:
    >>> commands = FileCommands()  # doctest: +SKIP
    >>> commands.invoke("get_file_tree", path="/proj")  # doctest: +SKIP
    {'ok': True, 'data': {'name': 'proj', 'path': '/proj', 'is_directory': True, 'children': [...]}}
    >>> commands.invoke("read_file_content", path="/missing")  # doctest: +SKIP
    {'ok': False, 'error': "[Errno 2] No such file or directory: '/missing'"}
"""

import logging
from typing import Any, Dict, Optional

from foldertree.exceptions import CommandError, UnknownCommandError
from foldertree.file_tree.file_node import FileNode
from foldertree.file_tree.tree_builder import FileTreeBuilder
from foldertree.io.directory_picker import DirectoryPicker, TkDirectoryPicker
from foldertree.io.text_reader import LocalTextReader, TextReader
from foldertree.types import PathType

logger = logging.getLogger(__name__)

# Host command name -> FileCommands method
COMMAND_NAMES = {
    "open_folder_dialog": "pick_directory",
    "read_file_content": "read_text",
    "get_file_tree": "get_tree",
}


class FileCommands:
    """Facade over the directory picker, the text reader, and the tree builder.

    The facade performs no validation of its own; paths are handed straight to the
    collaborators. It holds no per-request state, so a single instance may serve
    concurrent requests.

    Attributes:
        picker (DirectoryPicker): Source of user-selected directories.
        reader (TextReader): Source of file contents.
        builder (FileTreeBuilder): Builder for directory trees.
    """

    def __init__(
        self,
        picker: Optional[DirectoryPicker] = None,
        reader: Optional[TextReader] = None,
        builder: Optional[FileTreeBuilder] = None,
    ) -> None:
        """Initialize the facade.

        Args:
            picker: Directory picker. Defaults to TkDirectoryPicker.
            reader: Text reader. Defaults to LocalTextReader.
            builder: Tree builder. Defaults to FileTreeBuilder with the standard skip list.
        """
        self.picker = picker if picker is not None else TkDirectoryPicker()
        self.reader = reader if reader is not None else LocalTextReader()
        self.builder = builder if builder is not None else FileTreeBuilder()

    def pick_directory(self) -> Optional[str]:
        """Ask the user to choose a directory.

        Returns:
            The chosen path, or None if the user cancelled. The path is not validated.
        """
        return self.picker.pick_directory()

    def read_text(self, path: PathType) -> str:
        """Read a file's complete contents as UTF-8 text.

        Args:
            path: The file to read.

        Returns:
            The file contents.

        Raises:
            CommandError: If the path is invalid, the file cannot be read, or it is not valid UTF-8.
        """
        try:
            return self.reader.read_text(path)
        except (OSError, ValueError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            raise CommandError.from_exception(e) from e

    def get_tree(self, path: PathType) -> FileNode:
        """Build the filtered file tree rooted at a path.

        Args:
            path: File or directory to describe.

        Returns:
            The root FileNode.

        Raises:
            CommandError: If the path is invalid, cannot be read, or a directory listing fails.
        """
        try:
            return self.builder.build(path)
        except (OSError, ValueError) as e:
            logger.debug("Failed to build file tree for %s: %s", path, e)
            raise CommandError.from_exception(e) from e

    def invoke(self, command: str, **args: Any) -> Dict[str, Any]:
        """Run a command by its host-facing name and wrap the outcome.

        Args:
            command: One of the keys of COMMAND_NAMES.
            **args: Keyword arguments for the command (``path`` for the file commands).

        Returns:
            ``{"ok": True, "data": value}`` on success, where a FileNode value is
            converted with to_dict(); ``{"ok": False, "error": message}`` if the
            command raised CommandError.

        Raises:
            UnknownCommandError: If the command name is not registered.
        """
        if command not in COMMAND_NAMES:
            raise UnknownCommandError(command)
        handler = getattr(self, COMMAND_NAMES[command])

        try:
            result = handler(**args)
        except CommandError as e:
            return {"ok": False, "error": e.message}

        if isinstance(result, FileNode):
            result = result.to_dict()
        return {"ok": True, "data": result}
