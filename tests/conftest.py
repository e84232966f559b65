"""Test configuration and fixtures for foldertree."""

import pytest


@pytest.fixture
def project_dir(tmp_path):
    """Create a small project directory with hidden and noise entries.

    proj/
        a.txt
        .hidden
        node_modules/pkg/index.js
        src/b.txt
    """
    root = tmp_path / "proj"
    root.mkdir()
    (root / "a.txt").write_text("alpha")
    (root / ".hidden").write_text("secret")
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = {}")
    (root / "src").mkdir()
    (root / "src" / "b.txt").write_text("beta")
    return root
