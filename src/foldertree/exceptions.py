class CommandError(Exception):
    """
    Exception raised when a host-facing command fails.

    Every failure reaching the host shell is flattened to a human-readable message.
    The original exception, when there is one, is kept as ``__cause__`` for
    diagnostics but is never part of the message contract.

    Attributes:
        message (str): The user-facing description of the failure. Never empty.

    Example:
        >>> error = CommandError("No such file or directory")
        >>> error.message
        'No such file or directory'
        >>> CommandError.from_exception(FileNotFoundError()).message
        'FileNotFoundError'
    """

    def __init__(self, message: str) -> None:
        """
        Initialize the exception with a user-facing message.

        Args:
            message (str): Description of the failure.
        """
        self.message = message
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "CommandError":
        """
        Build a CommandError whose message is the text of another exception.

        Exceptions with an empty string form (e.g. ``FileNotFoundError()``) fall back
        to their class name so the message is never empty.

        Args:
            exc (BaseException): The exception being flattened.

        Returns:
            CommandError: A new error carrying the flattened message.
        """
        return cls(str(exc) or type(exc).__name__)


class TreeDepthError(OSError):
    """
    Exception raised when tree building descends past the configured depth limit.

    This is an OSError so the tree builder treats it like any other failure of a single
    child: the child is logged and dropped while its siblings are kept.

    Attributes:
        path (str): Path of the entry that was too deep.
        max_depth (int): The limit that was exceeded.

    Example:
        >>> error = TreeDepthError("/a/b/c", 2)
        >>> str(error)
        'Maximum tree depth of 2 exceeded at /a/b/c'
    """

    def __init__(self, path: str, max_depth: int) -> None:
        """
        Initialize the exception with the offending path and the depth limit.

        Args:
            path (str): Path of the entry that was too deep.
            max_depth (int): The configured depth limit.
        """
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"Maximum tree depth of {max_depth} exceeded at {path}")


class UnknownCommandError(Exception):
    """
    Exception raised when the host asks for a command that is not registered.

    Example:
        >>> str(UnknownCommandError("delete_everything"))
        'Unknown command: delete_everything'
    """

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unknown command: {command}")
