"""
End-to-end tests against an installed cmake and C++ compiler.

Run with ``pytest --integration``.
"""

from unittest.mock import Mock

import pytest

from cbake.cli.commands import build, clean, new
from cbake.cmake.exec import detect_version


@pytest.mark.integration
class TestRealCMake:
    """Drive the commands with the real toolchain."""

    def test_detect_version(self, cmake_available):
        version = detect_version()

        assert version.major >= 2

    def test_new_build_clean(self, temp_dir, cmake_available):
        project = temp_dir / "hello"

        assert (
            new.run(Mock(path=project, cpp_standard=None, build_type=None, config=None))
            == 0
        )
        assert (project / "build" / "CMakeCache.txt").exists()

        (project / "greet.h").write_text("#pragma once\n")
        args = Mock(project_root=project, config=None, release=False)
        assert build.run(args) == 0
        assert "greet.h" in (project / "CMakeLists.txt").read_text()

        assert clean.run(Mock(project_root=project, config=None)) == 0
        assert not (project / "build" / "CMakeCache.txt").exists()
