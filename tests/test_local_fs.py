"""Tests for the local filesystem adapter"""

from pathlib import Path

import pytest

from toprompt.application.prompt_collector import PromptCollector
from toprompt.domain.models.outcome import SkippedError
from toprompt.infrastructure.local_fs import LocalFileEntry, looks_binary


class TestLooksBinary:
    """Tests for binary classification"""

    def test_plain_text(self):
        assert not looks_binary(b"hello\nworld\n")

    def test_nul_byte(self):
        assert looks_binary(b"abc\x00def")

    def test_invalid_utf8(self):
        assert looks_binary(b"\xff\xd8\xff\xe0 JFIF")

    def test_multibyte_cut_at_boundary(self):
        """Test a sample ending mid-character is still text"""
        sample = "héllo €".encode("utf-8")[:-1]
        assert not looks_binary(sample)

    def test_empty(self):
        assert not looks_binary(b"")


class TestLocalFileEntry:
    """Tests for LocalFileEntry"""

    def test_file_properties(self, tmp_path):
        """Test path, length and content of a file"""
        file_path = tmp_path / "a.txt"
        file_path.write_bytes(b"12345")
        entry = LocalFileEntry(file_path)

        assert entry.path == str(file_path)
        assert not entry.is_directory
        assert entry.length == 5
        assert not entry.is_binary
        assert entry.read_bytes() == b"12345"
        assert entry.children == []

    def test_relative_path_made_absolute(self, tmp_path, monkeypatch):
        """Test relative paths are reported absolute"""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "rel.txt").write_text("x", encoding="utf-8")
        assert LocalFileEntry("rel.txt").path == str(tmp_path / "rel.txt")

    def test_children_sorted_by_name(self, tmp_path):
        """Test directory listing order is deterministic"""
        for name in ["c.txt", "a.txt", "b"]:
            (tmp_path / name).write_text(name, encoding="utf-8")
        entry = LocalFileEntry(tmp_path)

        assert entry.is_directory
        assert [child.path for child in entry.children] == [
            str(tmp_path / "a.txt"),
            str(tmp_path / "b"),
            str(tmp_path / "c.txt"),
        ]

    def test_binary_file(self, tmp_path):
        """Test files with NUL bytes are binary"""
        file_path = tmp_path / "data.bin"
        file_path.write_bytes(b"\x00" * 16)
        assert LocalFileEntry(file_path).is_binary

    def test_missing_file_raises_on_read(self, tmp_path):
        """Test read failures surface as OSError"""
        entry = LocalFileEntry(tmp_path / "gone.txt")
        assert not entry.is_binary
        with pytest.raises(OSError):
            entry.read_bytes()

    def test_stat_failure_is_not_a_directory(self, tmp_path, monkeypatch):
        """Test a permission error while checking the type does not propagate"""
        (tmp_path / "a.txt").write_text("a", encoding="utf-8")
        (tmp_path / "locked").mkdir()
        original_is_dir = Path.is_dir

        def is_dir(self, **kwargs):
            if self.name == "locked":
                raise PermissionError(13, "Permission denied", str(self))
            return original_is_dir(self, **kwargs)

        monkeypatch.setattr(Path, "is_dir", is_dir)

        assert not LocalFileEntry(tmp_path / "locked").is_directory
        result = PromptCollector().collect_result([LocalFileEntry(tmp_path)])

        assert [e.path for e in result.entries] == [str(tmp_path / "a.txt")]
        path, outcome = result.skipped[0]
        assert path == str(tmp_path / "locked")
        assert isinstance(outcome, SkippedError)

    def test_normalized_path(self, tmp_path):
        """Test normalized path uses forward slashes"""
        entry = LocalFileEntry(tmp_path / "x.txt")
        assert "\\" not in entry.normalized_path
