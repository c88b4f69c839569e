"""
Tests for the init command.
"""

from unittest.mock import Mock

import pytest

from cbake.cli.commands import init
from cbake.config import CONFIG_FILE_NAME
from cbake.core.exceptions import CommandError
from cbake.layout import MAIN_CPP_CONTENTS


def make_args(project_root, force=False):
    return Mock(project_root=project_root, config=None, force=force)


class TestInitCommand:
    """Test initializing an existing directory."""

    def test_picks_up_existing_sources(self, temp_dir, fake_cmake):
        project = temp_dir / "calc"
        project.mkdir()
        (project / "main.cpp").write_text("int main() {}\n")
        (project / "calc.cpp").write_text("")
        (project / "calc.h").write_text("")

        result = init.run(make_args(project))

        assert result == 0
        cmake_lists = (project / "CMakeLists.txt").read_text()
        assert "project(calc)" in cmake_lists
        assert "    calc.cpp\n    calc.h\n    main.cpp\n)" in cmake_lists
        assert (project / CONFIG_FILE_NAME).exists()
        assert len(fake_cmake.configure_calls) == 1

    def test_empty_directory_gets_main(self, temp_dir, fake_cmake):
        project = temp_dir / "empty"
        project.mkdir()

        init.run(make_args(project))

        assert (project / "main.cpp").read_text() == MAIN_CPP_CONTENTS
        assert "    main.cpp\n)" in (project / "CMakeLists.txt").read_text()

    def test_configured_include_dirs(self, temp_dir, fake_cmake):
        project = temp_dir / "app"
        project.mkdir()
        (project / "main.cpp").write_text("")
        (project / CONFIG_FILE_NAME).write_text("include_dirs:\n  - include\n")

        init.run(make_args(project))

        cmake_lists = (project / "CMakeLists.txt").read_text()
        assert "include_directories(\n    include\n)" in cmake_lists
        assert (project / CONFIG_FILE_NAME).read_text() == "include_dirs:\n  - include\n"

    def test_refuses_existing_cmake_lists(self, project_dir, fake_cmake):
        original = (project_dir / "CMakeLists.txt").read_text()

        with pytest.raises(CommandError) as exc_info:
            init.run(make_args(project_dir))

        assert exc_info.value.what == "Project already initialized"
        assert (project_dir / "CMakeLists.txt").read_text() == original

    def test_force_regenerates(self, project_dir, fake_cmake):
        (project_dir / "CMakeLists.txt").write_text("# custom\n")

        result = init.run(make_args(project_dir, force=True))

        assert result == 0
        assert "add_executable" in (project_dir / "CMakeLists.txt").read_text()

    def test_invalid_config(self, temp_dir, fake_cmake):
        project = temp_dir / "app"
        project.mkdir()
        (project / CONFIG_FILE_NAME).write_text("build: [\n")

        with pytest.raises(CommandError) as exc_info:
            init.run(make_args(project))

        assert exc_info.value.what == "Cannot load project configuration"
        assert not (project / "CMakeLists.txt").exists()
