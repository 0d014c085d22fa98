"""Shared pytest fixtures for the StarterKit test suite.

Provides reusable fixtures for:
- A temporary Unity-style project directory
- Config / EditorHost / ModuleInstaller wired to that project
- Helpers for writing C# sources and snapshotting the project tree
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from starterkit.config import Config
from starterkit.host import EditorHost
from starterkit.scaffolder import ModuleInstaller


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with an empty ``Assets/`` folder (auto-cleanup)."""
    root = tmp_path / "MyGame"
    (root / "Assets").mkdir(parents=True)
    yield root


@pytest.fixture
def config(project_root: Path) -> Config:
    return Config(project_root=project_root)


# ---------------------------------------------------------------------------
# Host & installer
# ---------------------------------------------------------------------------


@pytest.fixture
def host(config: Config) -> EditorHost:
    """An opened (compiled once) editor host for the temporary project."""
    return EditorHost.open(config)


@pytest.fixture
def installer(host: EditorHost) -> ModuleInstaller:
    return ModuleInstaller(host)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def write_source(project_root: Path) -> Callable[[str, str], Path]:
    """Write a C# source file at a logical path, creating parent folders."""

    def _write(logical_path: str, text: str) -> Path:
        path = project_root / logical_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def snapshot_tree() -> Callable[[Path], dict[str, bytes]]:
    """Return a helper mapping every file under a root to its bytes."""

    def _snapshot(root: Path) -> dict[str, bytes]:
        return {
            path.relative_to(root).as_posix(): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return _snapshot
