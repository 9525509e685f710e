"""Shared fixtures for the asset organizer test suite."""
from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from assetorg.logger import RunLogger


def make_file(root: Path, rel: str, content: str | None = None) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content if content is not None else f"contents of {rel}", encoding="utf-8")
    return path


def tree(root: Path) -> list[str]:
    """Every file under root as a sorted list of POSIX relative paths."""
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    root = tmp_path / "Assets"
    root.mkdir()
    return root


@pytest.fixture
def sample_tree(asset_root: Path) -> Path:
    """The four-file project from the end-to-end scenario."""
    make_file(asset_root, "Foo.cs", "class Foo {}")
    make_file(asset_root, "Bar.png")
    make_file(asset_root, "Level.unity")
    make_file(asset_root, "Thing.prefab")
    return asset_root


@pytest.fixture
def logger() -> RunLogger:
    return RunLogger(clock=lambda: datetime(2026, 1, 2, 3, 4, 5))
