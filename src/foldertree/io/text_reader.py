"""Whole-file text reading."""

from abc import ABC, abstractmethod

from foldertree.types import PathType


class TextReader(ABC):
    """Capability to read a file's complete contents as text.

    Example:
        >>> class FakeReader(TextReader):
        ...     def read_text(self, path):
        ...         return "hello"
        >>> FakeReader().read_text("/any/file.txt")
        'hello'
    """

    @abstractmethod
    def read_text(self, path: PathType) -> str:
        """Read the entire file at a path as text.

        Args:
            path: The file to read.

        Returns:
            The decoded contents.

        Raises:
            OSError: If the file cannot be opened or read.
            UnicodeDecodeError: If the contents are not valid text.
        """
        pass


class LocalTextReader(TextReader):
    """Reads files from the local filesystem as strict UTF-8.

    The whole file is loaded into memory at once. Line endings are returned exactly as
    stored on disk.

    Attributes:
        encoding (str): Codec used to decode file contents. Defaults to "utf-8".

    Example:
        >>> LocalTextReader().read_text("/does/not/exist")
        Traceback (most recent call last):
            ...
        FileNotFoundError: [Errno 2] No such file or directory: '/does/not/exist'
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_text(self, path: PathType) -> str:
        with open(path, "r", encoding=self.encoding, errors="strict", newline="") as f:
            return f.read()
