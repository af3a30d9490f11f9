"""Shared pytest fixtures for ngxpurge tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from ngxpurge.features.purge.adapters import MemorySettingsStore
from ngxpurge.platform.hooks import HookRegistry

# 32 hexadecimal characters, the shape Nginx gives cache entries.
CACHE_KEY_A = "d41d8cd98f00b204e9800998ecf8427e"
CACHE_KEY_B = "0cc175b9c0f1b6a831c399e269772661"


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import ngxpurge.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("NGXPURGE_CONFIG", raising=False)
    monkeypatch.delenv("NGXPURGE_DATA_DIR", raising=False)
    return tmp_path


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    """Create a directory laid out like an Nginx cache (levels=1:2)."""

    root = tmp_path / "nginx-cache"
    leaf = root / "e" / "27"
    leaf.mkdir(parents=True)
    _ = (leaf / CACHE_KEY_A).write_bytes(b"x" * 10)
    _ = (root / CACHE_KEY_B).write_bytes(b"y" * 20)
    _ = (root / "e" / "cache.lock").write_text("")
    return root


@pytest.fixture
def events() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def settings_for() -> Callable[..., MemorySettingsStore]:
    """Build an in-memory settings store with the given option values."""

    def _build(cache_path: str = "", auto_purge: bool = True, show_footer: bool = True) -> MemorySettingsStore:
        return MemorySettingsStore(
            {
                "cache_path": cache_path,
                "auto_purge": auto_purge,
                "show_footer": show_footer,
            }
        )

    return _build
