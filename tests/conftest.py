from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory filesystem so renderer tests never touch the disk.
3. The reference 'myFolder' tree materialized on tmp_path.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from truffula.infra.fs import FileSystem  # noqa: E402


# -----------------------------------------------------------------------------
# In-Memory Filesystem
# -----------------------------------------------------------------------------
class FakeFileSystem(FileSystem):
    """
    FileSystem backed by a nested dict.

    Directories are dicts, files are None. Paths are '/'-joined from the
    root name. Paths in 'unlistable' behave like directories that fail to
    list; paths in 'hidden_flags' carry a platform hidden attribute.
    """

    def __init__(
            self,
            root_name: str,
            tree: Dict[str, Any],
            unlistable: Iterable[str] = (),
            hidden_flags: Iterable[str] = (),
    ) -> None:
        self.root = root_name
        self._tree = tree
        self.unlistable = set(unlistable)
        self.hidden_flags = set(hidden_flags)
        self.listed: List[str] = []

    def _lookup(self, path: str) -> Optional[Any]:
        parts = path.split("/")
        if parts[0] != self.root:
            return None
        node: Any = self._tree
        for part in parts[1:]:
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def list_children(self, path: str) -> List[str]:
        self.listed.append(path)
        if path in self.unlistable:
            return []
        node = self._lookup(path)
        if not isinstance(node, dict):
            return []
        # Reverse insertion order so tests cannot pass by accident
        return [f"{path}/{name}" for name in reversed(list(node))]

    def is_dir(self, path: str) -> bool:
        return isinstance(self._lookup(path), dict)

    def is_hidden(self, path: str) -> bool:
        return self.name(path).startswith(".") or path in self.hidden_flags

    def name(self, path: str) -> str:
        return path.rsplit("/", 1)[-1]


@pytest.fixture
def fake_fs() -> Callable[..., FakeFileSystem]:
    """Factory fixture building FakeFileSystem instances."""
    return FakeFileSystem


@pytest.fixture
def my_folder_tree() -> Dict[str, Any]:
    """
    The reference tree as a nested dict.

    myFolder/
       .hidden.txt
       Apple.txt
       banana.txt
       Documents/
          images/
             Cat.png
             cat.png
             Dog.png
          notes.txt
          README.md
       zebra.txt
    """
    return {
        "zebra.txt": None,
        ".hidden.txt": None,
        "banana.txt": None,
        "Documents": {
            "README.md": None,
            "notes.txt": None,
            "images": {
                "cat.png": None,
                "Dog.png": None,
                "Cat.png": None,
            },
        },
        "Apple.txt": None,
    }


def _materialize(base: Path, tree: Dict[str, Any]) -> None:
    for name, node in tree.items():
        target = base / name
        if isinstance(node, dict):
            target.mkdir()
            _materialize(target, node)
        else:
            target.write_text("", encoding="utf-8")


@pytest.fixture
def build_tree(tmp_path: Path) -> Callable[[str, Dict[str, Any]], Path]:
    """Create a nested dict tree under tmp_path and return its root."""

    def _build(root_name: str, tree: Dict[str, Any]) -> Path:
        root = tmp_path / root_name
        root.mkdir()
        _materialize(root, tree)
        return root

    return _build


@pytest.fixture
def case_sensitive_fs(tmp_path: Path) -> bool:
    """True when tmp_path can hold names differing only by case."""
    (tmp_path / "CaseCheck").write_text("", encoding="utf-8")
    sensitive = not (tmp_path / "casecheck").exists()
    (tmp_path / "CaseCheck").unlink()
    return sensitive
