"""Shared fixtures for wildfilter tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a standard test directory tree.

    Structure::

        root/
        ├── .env
        ├── .gitignore          (*.class, build/)
        ├── Build.java
        ├── README.md
        ├── build/
        │   └── Main.class
        ├── docs/
        │   └── guide.md
        └── src/
            ├── Main.java
            ├── MytestFile.java
            ├── Util.class
            └── test/
                └── MyTESTFile.java
    """
    (tmp_path / ".env").write_text("secret")
    (tmp_path / ".gitignore").write_text("*.class\nbuild/\n")
    (tmp_path / "Build.java").write_text("build")
    (tmp_path / "README.md").write_text("readme")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "Main.class").write_bytes(b"\xca\xfe")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "guide.md").write_text("guide")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Main.java").write_text("main")
    (tmp_path / "src" / "MytestFile.java").write_text("test")
    (tmp_path / "src" / "Util.class").write_bytes(b"\xca\xfe")
    (tmp_path / "src" / "test").mkdir()
    (tmp_path / "src" / "test" / "MyTESTFile.java").write_text("test")
    return tmp_path
