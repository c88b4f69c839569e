"""
Tests for the run command.
"""

from unittest.mock import Mock

from cbake.cli.commands import run
from cbake.cli.utils import exe_name


def make_args(project_root, release=False):
    return Mock(project_root=project_root, config=None, release=release)


class TestRunCommand:
    """Test building and running the executable."""

    def test_runs_debug_executable(self, project_dir, fake_cmake, capsys):
        result = run.run(make_args(project_dir))

        assert result == 0
        executable = project_dir.resolve() / "build" / "Debug" / exe_name("hello")
        assert fake_cmake.calls[-1] == [str(executable)]
        assert "Running hello" in capsys.readouterr().out

    def test_runs_release_executable(self, project_dir, fake_cmake):
        run.run(make_args(project_dir, release=True))

        assert fake_cmake.calls[-1][0].endswith(
            str(project_dir.resolve() / "build" / "Release" / exe_name("hello"))
        )

    def test_returns_program_exit_code(self, project_dir, fake_cmake):
        fake_cmake.program_returncode = 3

        assert run.run(make_args(project_dir)) == 3

    def test_build_failure_skips_run(self, project_dir, fake_cmake):
        fake_cmake.build_returncode = 1

        result = run.run(make_args(project_dir))

        assert result == 1
        assert fake_cmake.calls[-1][:2] == ["cmake", "--build"]


class TestExeName:
    def test_platform_suffix(self, monkeypatch):
        monkeypatch.setattr("cbake.cli.utils.os.name", "nt")
        assert exe_name("hello") == "hello.exe"

        monkeypatch.setattr("cbake.cli.utils.os.name", "posix")
        assert exe_name("hello") == "hello"
