"""Native directory selection dialogs."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

logger = logging.getLogger(__name__)

DIALOG_TITLE = "Select Project Folder"
DIALOG_INITIAL_DIRECTORY = "/"


class DirectoryPicker(ABC):
    """Capability to ask the user for a directory.

    Cancelling the dialog is an ordinary outcome, reported as None rather than as an
    error.
    """

    @abstractmethod
    def pick_directory(self) -> Optional[str]:
        """Show a directory chooser and wait for the user.

        Returns:
            The chosen directory path, or None if the user cancelled.
        """
        pass


class TkDirectoryPicker(DirectoryPicker):
    """Directory picker backed by the native Tk folder dialog.

    A hidden Tk root window is created for each dialog and destroyed afterwards, so
    the picker can be used from code that has no Tk main loop of its own. tkinter is
    imported on first use; building a picker does not require a display.

    Attributes:
        title (str): Dialog window title.
        initial_directory (str): Directory the dialog opens in.

    Example:
        >>> picker = TkDirectoryPicker()
        >>> picker.title
        'Select Project Folder'
        >>> picker.pick_directory()  # doctest: +SKIP
        '/home/user/projects/app'
    """

    def __init__(self, title: str = DIALOG_TITLE, initial_directory: str = DIALOG_INITIAL_DIRECTORY) -> None:
        self.title = title
        self.initial_directory = initial_directory

    def pick_directory(self) -> Optional[str]:
        import tkinter as tk
        from tkinter import filedialog

        root = tk.Tk()
        root.withdraw()
        try:
            selected: Any = filedialog.askdirectory(
                parent=root,
                title=self.title,
                initialdir=self.initial_directory,
                mustexist=True,
            )
        finally:
            root.destroy()

        # Tk reports a cancelled dialog as "" or, on some platforms, an empty tuple
        if not selected:
            logger.debug("Directory selection cancelled")
            return None
        return str(selected)
