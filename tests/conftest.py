"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

TreeFactory = Callable[[dict[str, int | None]], Path]


def build_tree(root: Path, layout: dict[str, int | None]) -> Path:
    """Create files and directories under root.

    Keys are relative paths. An int value creates a file of that many
    bytes; None creates a directory.
    """
    for rel, size in layout.items():
        target = root / rel
        if size is None:
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"x" * size)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Factory creating a project tree in a fresh directory."""
    counter = {"n": 0}

    def _make(layout: dict[str, int | None]) -> Path:
        counter["n"] += 1
        root = tmp_path / f"project{counter['n']}"
        root.mkdir()
        return build_tree(root, layout)

    return _make


@pytest.fixture
def mixed_layout() -> dict[str, int | None]:
    """A C++/Python project with sources, build output and editor debris."""
    return {
        "CMakeLists.txt": 40,
        "main.cpp": 50,
        "include/app.h": 30,
        "include/app.hpp": 30,
        "src/core.cpp": 80,
        "src/core.o": 200,
        "src/notes.txt~": 10,
        "src/.DS_Store": 6,
        "build/app": 1000,
        "build/CMakeFiles/cache.txt": 24,
        "scripts/tool.py": 20,
        "scripts/__pycache__/tool.cpython-312.pyc": 64,
        "docs/readme.md": 12,
        "docs/readme.md.swp": 8,
        ".git/HEAD": 21,
        ".git/objects/ab/cdef": 33,
        ".idea/workspace.xml": 90,
    }
