"""Capability interfaces for the operating-system services the commands rely on."""

from .directory_picker import DirectoryPicker, TkDirectoryPicker
from .text_reader import LocalTextReader, TextReader

__all__ = [
    "DirectoryPicker",
    "LocalTextReader",
    "TextReader",
    "TkDirectoryPicker",
]
