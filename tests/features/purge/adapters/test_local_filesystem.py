"""Tests for the local filesystem adapter."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from ngxpurge.features.purge import CacheEntry, is_nginx_cache_listing
from ngxpurge.features.purge.adapters import LocalCacheFilesystem
from ngxpurge.features.purge.usecases.ports import CacheFilesystem


def test_adapter_satisfies_port() -> None:
    assert isinstance(LocalCacheFilesystem(), CacheFilesystem)


def test_list_recursive_returns_sorted_tree(cache_root: Path) -> None:
    listing = LocalCacheFilesystem().list_recursive(str(cache_root))

    names = [entry.name for entry in listing]
    assert names == sorted(names)
    directory = next(entry for entry in listing if entry.is_directory)
    assert directory.name == "e"
    assert [child.name for child in directory.children] == ["27", "cache.lock"]
    assert is_nginx_cache_listing(listing)


def test_list_recursive_missing_path_is_empty(tmp_path: Path) -> None:
    assert LocalCacheFilesystem().list_recursive(str(tmp_path / "missing")) == ()


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlink_cycle_is_listed_once(tmp_path: Path) -> None:
    """A directory symlinked back into its parent is not walked again."""

    root = tmp_path / "cache"
    (root / "a").mkdir(parents=True)
    os.symlink(root, root / "a" / "loop")

    listing = LocalCacheFilesystem().list_recursive(str(root))

    assert listing == (CacheEntry.directory("a", [CacheEntry.directory("loop")]),)


def test_max_depth_truncates_listing(tmp_path: Path) -> None:
    deep = tmp_path / "root" / "1" / "2" / "3"
    deep.mkdir(parents=True)
    _ = (deep / "stray").write_text("")

    listing = LocalCacheFilesystem(max_depth=2).list_recursive(str(tmp_path / "root"))

    assert listing == (CacheEntry.directory("1", [CacheEntry.directory("2")]),)


def test_remove_and_create_directory(cache_root: Path) -> None:
    fs = LocalCacheFilesystem()

    fs.remove_recursive(str(cache_root))
    assert not fs.exists(str(cache_root))

    fs.create_directory(str(cache_root))
    assert fs.is_directory(str(cache_root))
    assert fs.is_writable(str(cache_root))


def test_remove_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        LocalCacheFilesystem().remove_recursive(str(tmp_path / "missing"))


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_remove_through_symlinked_root_empties_target(cache_root: Path, tmp_path: Path) -> None:
    """The link survives, the target is emptied and nested links are not followed."""

    outside = tmp_path / "outside"
    outside.mkdir()
    _ = (outside / "keep.txt").write_text("keep")
    os.symlink(outside, cache_root / "elsewhere", target_is_directory=True)
    link = tmp_path / "cache-link"
    os.symlink(cache_root, link, target_is_directory=True)
    fs = LocalCacheFilesystem()

    fs.remove_recursive(str(link))
    fs.create_directory(str(link))

    assert link.is_symlink()
    assert list(cache_root.iterdir()) == []
    assert (outside / "keep.txt").exists()
