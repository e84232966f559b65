"""Unit tests for the FileCommands facade."""

import json
import os
from typing import Optional
from unittest.mock import Mock

import pytest

from foldertree.commands import COMMAND_NAMES, FileCommands
from foldertree.exceptions import CommandError, UnknownCommandError
from foldertree.file_tree.file_node import FileNode
from foldertree.file_tree.tree_builder import FileTreeBuilder
from foldertree.io.directory_picker import DirectoryPicker, TkDirectoryPicker
from foldertree.io.text_reader import LocalTextReader, TextReader


class FakePicker(DirectoryPicker):
    """Picker returning a fixed answer."""

    def __init__(self, selection: Optional[str]):
        self.selection = selection
        self.calls = 0

    def pick_directory(self) -> Optional[str]:
        self.calls += 1
        return self.selection


class FakeReader(TextReader):
    """Reader serving files from a dictionary."""

    def __init__(self, files):
        self.files = files

    def read_text(self, path):
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        content = self.files[path]
        if isinstance(content, bytes):
            return content.decode("utf-8")
        return content


@pytest.fixture
def commands():
    return FileCommands(
        picker=FakePicker("/chosen"),
        reader=FakeReader({"/a.txt": "alpha", "/bad.bin": b"\xff\xfe"}),
    )


def test_default_collaborators():
    commands = FileCommands()
    assert isinstance(commands.picker, TkDirectoryPicker)
    assert isinstance(commands.reader, LocalTextReader)
    assert isinstance(commands.builder, FileTreeBuilder)


class TestPickDirectory:
    def test_returns_selection(self, commands):
        assert commands.pick_directory() == "/chosen"
        assert commands.picker.calls == 1

    def test_cancel_is_not_an_error(self):
        commands = FileCommands(picker=FakePicker(None))
        assert commands.pick_directory() is None


class TestReadText:
    def test_returns_contents(self, commands):
        assert commands.read_text("/a.txt") == "alpha"

    def test_missing_file(self, commands):
        with pytest.raises(CommandError) as exc_info:
            commands.read_text("/missing")
        assert exc_info.value.message
        assert "/missing" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_decode_error(self, commands):
        with pytest.raises(CommandError) as exc_info:
            commands.read_text("/bad.bin")
        assert "utf-8" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_real_missing_file(self, tmp_path):
        with pytest.raises(CommandError) as exc_info:
            FileCommands(picker=FakePicker(None)).read_text(str(tmp_path / "missing"))
        assert exc_info.value.message


class TestGetTree:
    def test_builds_tree(self, project_dir, commands):
        tree = commands.get_tree(str(project_dir))
        assert isinstance(tree, FileNode)
        assert sorted(child.name for child in tree.children) == ["a.txt", "src"]

    def test_missing_path(self, tmp_path, commands):
        with pytest.raises(CommandError) as exc_info:
            commands.get_tree(str(tmp_path / "missing"))
        assert "missing" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_uses_given_builder(self):
        builder = Mock(spec=FileTreeBuilder)
        builder.build.return_value = FileNode("x", "/x")
        commands = FileCommands(picker=FakePicker(None), builder=builder)

        assert commands.get_tree("/x") == FileNode("x", "/x")
        builder.build.assert_called_once_with("/x")

    def test_builder_error_message(self):
        builder = Mock(spec=FileTreeBuilder)
        builder.build.side_effect = PermissionError(13, "Permission denied", "/root/secret")
        commands = FileCommands(picker=FakePicker(None), builder=builder)

        with pytest.raises(CommandError) as exc_info:
            commands.get_tree("/root/secret")
        assert exc_info.value.message == "[Errno 13] Permission denied: '/root/secret'"


class TestInvoke:
    def test_command_names(self):
        assert set(COMMAND_NAMES) == {"open_folder_dialog", "read_file_content", "get_file_tree"}

    def test_open_folder_dialog(self, commands):
        assert commands.invoke("open_folder_dialog") == {"ok": True, "data": "/chosen"}

    def test_open_folder_dialog_cancelled(self):
        commands = FileCommands(picker=FakePicker(None))
        assert commands.invoke("open_folder_dialog") == {"ok": True, "data": None}

    def test_read_file_content(self, commands):
        assert commands.invoke("read_file_content", path="/a.txt") == {"ok": True, "data": "alpha"}

    def test_read_file_content_failure(self, commands):
        response = commands.invoke("read_file_content", path="/missing")
        assert response["ok"] is False
        assert response["error"]
        assert "data" not in response

    def test_get_file_tree(self, project_dir, commands):
        response = commands.invoke("get_file_tree", path=str(project_dir))
        assert response["ok"] is True
        data = response["data"]
        assert data["name"] == "proj"
        assert data["is_directory"] is True
        by_name = {child["name"]: child for child in data["children"]}
        assert set(by_name) == {"a.txt", "src"}
        assert by_name["a.txt"]["children"] is None
        assert by_name["src"]["children"][0]["name"] == "b.txt"
        json.dumps(response)

    def test_get_file_tree_failure(self, tmp_path, commands):
        response = commands.invoke("get_file_tree", path=str(tmp_path / "missing"))
        assert set(response) == {"ok", "error"}
        assert response["ok"] is False
        assert "missing" in response["error"]

    def test_read_file_content_nul_path(self, tmp_path):
        commands = FileCommands(picker=FakePicker(None))
        response = commands.invoke("read_file_content", path=str(tmp_path / "a\x00b"))
        assert response["ok"] is False
        assert "null byte" in response["error"]

    def test_get_file_tree_nul_path(self, tmp_path):
        commands = FileCommands(picker=FakePicker(None))
        response = commands.invoke("get_file_tree", path=str(tmp_path / "a\x00b"))
        assert response["ok"] is False
        assert "null byte" in response["error"]

    def test_get_file_tree_undecodable_name_is_json_safe(self, tmp_path):
        root = tmp_path / "proj"
        root.mkdir()
        try:
            with open(os.path.join(os.fsencode(root), b"bad\xff.txt"), "w") as f:
                f.write("x")
        except (OSError, UnicodeEncodeError):
            pytest.skip("Filesystem does not accept non-UTF-8 file names")

        response = FileCommands(picker=FakePicker(None)).invoke("get_file_tree", path=str(root))
        encoded = json.dumps(response, ensure_ascii=False).encode("utf-8")
        assert "bad\ufffd.txt".encode("utf-8") in encoded

    def test_unknown_command(self, commands):
        with pytest.raises(UnknownCommandError):
            commands.invoke("delete_everything")
