"""
Tests for filesystem utilities.
"""

import pytest

from cbake.core.filesystem import (
    FilesystemError,
    atomic_write,
    ensure_directory,
    is_relative_to,
    safe_rmtree,
)


class TestAtomicWrite:
    """Test atomic file writes."""

    def test_atomic_write_text(self, temp_dir):
        """Test atomic write with text content."""
        file_path = temp_dir / "CMakeLists.txt"
        content = "project(hello)\n"

        atomic_write(file_path, content)

        assert file_path.read_text() == content

    def test_atomic_write_binary(self, temp_dir):
        """Test atomic write with binary content."""
        file_path = temp_dir / "test.bin"
        content = b"\x00\x01\x02\x03"

        atomic_write(file_path, content)

        assert file_path.read_bytes() == content

    def test_atomic_write_creates_parent(self, temp_dir):
        """Test that parent directories are created."""
        file_path = temp_dir / "deep" / "nested" / "file.txt"

        atomic_write(file_path, "content")

        assert file_path.read_text() == "content"

    def test_atomic_write_overwrites_existing(self, temp_dir):
        """Test that atomic write overwrites existing file."""
        file_path = temp_dir / "test.txt"
        file_path.write_text("old content")

        atomic_write(file_path, "new content")

        assert file_path.read_text() == "new content"

    def test_atomic_write_keeps_newlines(self, temp_dir):
        """Line endings are written as given."""
        file_path = temp_dir / "test.txt"

        atomic_write(file_path, "a\nb\n")

        assert file_path.read_bytes() == b"a\nb\n"

    def test_atomic_write_leaves_no_temp_files(self, temp_dir):
        atomic_write(temp_dir / "test.txt", "content")

        assert [p.name for p in temp_dir.iterdir()] == ["test.txt"]

    def test_atomic_write_failure_keeps_original(self, temp_dir):
        """A failed write leaves the previous file intact."""
        file_path = temp_dir / "test.txt"
        file_path.write_text("original")

        with pytest.raises(TypeError):
            atomic_write(file_path, 42)

        assert file_path.read_text() == "original"
        assert [p.name for p in temp_dir.iterdir()] == ["test.txt"]


class TestSafeRmtree:
    """Test guarded directory removal."""

    def test_removes_tree(self, temp_dir):
        build = temp_dir / "build"
        (build / "Debug").mkdir(parents=True)
        (build / "CMakeCache.txt").write_text("cache")

        safe_rmtree(build, require_prefix=temp_dir)

        assert not build.exists()

    def test_missing_path_is_noop(self, temp_dir):
        safe_rmtree(temp_dir / "missing", require_prefix=temp_dir)

    def test_refuses_outside_prefix(self, temp_dir):
        project = temp_dir / "project"
        project.mkdir()
        outside = temp_dir / "outside"
        outside.mkdir()

        with pytest.raises(ValueError, match="Refusing to delete"):
            safe_rmtree(outside, require_prefix=project)

        assert outside.exists()

    def test_refuses_prefix_itself(self, temp_dir):
        with pytest.raises(ValueError):
            safe_rmtree(temp_dir, require_prefix=temp_dir)

    def test_not_a_directory(self, temp_dir):
        file_path = temp_dir / "file.txt"
        file_path.write_text("x")

        with pytest.raises(FilesystemError, match="not a directory"):
            safe_rmtree(file_path)


class TestPathHelpers:
    """Test path helpers."""

    def test_is_relative_to(self, temp_dir):
        assert is_relative_to(temp_dir / "a" / "b", temp_dir)
        assert not is_relative_to(temp_dir.parent, temp_dir)

    def test_ensure_directory_idempotent(self, temp_dir):
        path = temp_dir / "a" / "b"

        first = ensure_directory(path)
        second = ensure_directory(path)

        assert first == second == path.resolve()
        assert path.is_dir()
