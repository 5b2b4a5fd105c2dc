"""Tests for path <-> key mapping."""

from pathlib import Path

import pytest

from bucket_sync.keys import key_for_path, path_for_key


class TestKeyForPath:
    def test_joins_prefix_and_relative_path(self, tmp_path: Path):
        assert key_for_path("snap", tmp_path, tmp_path / "sub" / "b.txt") == "snap/sub/b.txt"

    def test_empty_prefix_gives_relative_path(self, tmp_path: Path):
        assert key_for_path("", tmp_path, tmp_path / "a.json") == "a.json"

    def test_prefix_slashes_are_normalized(self, tmp_path: Path):
        assert key_for_path("/snap/2024/", tmp_path, tmp_path / "a.json") == "snap/2024/a.json"

    def test_root_recurring_inside_path(self, tmp_path: Path):
        root = tmp_path / "data"
        path = root / "data" / "data" / "file.txt"

        assert key_for_path("p", root, path) == "p/data/data/file.txt"

    def test_relative_root_and_path(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert key_for_path("p", "out", "out/x/y.csv") == "p/x/y.csv"

    def test_root_with_trailing_separator(self, tmp_path: Path):
        assert key_for_path("p", f"{tmp_path}/", tmp_path / "a.txt") == "p/a.txt"

    def test_path_outside_root_rejected(self, tmp_path: Path):
        with pytest.raises(ValueError, match="not located under"):
            key_for_path("p", tmp_path / "root", tmp_path / "elsewhere" / "a.txt")

    def test_sibling_with_shared_name_prefix_rejected(self, tmp_path: Path):
        with pytest.raises(ValueError):
            key_for_path("p", tmp_path / "data", tmp_path / "database" / "a.txt")

    def test_root_itself_rejected(self, tmp_path: Path):
        with pytest.raises(ValueError):
            key_for_path("p", tmp_path, tmp_path)


class TestPathForKey:
    def test_only_last_segment_is_used(self, tmp_path: Path):
        assert path_for_key(tmp_path, "snap/sub/b.txt") == tmp_path / "b.txt"

    def test_key_without_separator(self, tmp_path: Path):
        assert path_for_key(tmp_path, "a.json") == tmp_path / "a.json"

    @pytest.mark.parametrize("key", ["", "snap/", "a/..", "."])
    def test_key_without_file_name_rejected(self, tmp_path: Path, key):
        with pytest.raises(ValueError, match="no file name"):
            path_for_key(tmp_path, key)
