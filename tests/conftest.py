"""
Pytest configuration and shared fixtures for cbake tests.
"""

import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Generator, List
from unittest.mock import Mock, patch

import pytest

from cbake.cmake.builder import CMakeListsBuilder
from cbake.cmake.generator import GeneratorProfile


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that invoke a real cmake",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )
    config.addinivalue_line("markers", "unit: fast tests without external processes")


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a project generated the way `cbake new` lays it out."""
    project = temp_dir / "hello"
    project.mkdir()
    (project / "build" / "Debug").mkdir(parents=True)
    (project / "build" / "Release").mkdir(parents=True)
    (project / "main.cpp").write_text("int main() { return 0; }\n")

    cmake_lists = (
        CMakeListsBuilder("hello", GeneratorProfile.MODERN)
        .cpp_standard(11)
        .sources(["main.cpp"])
        .finalize()
    )
    (project / "CMakeLists.txt").write_text(cmake_lists)
    return project


class FakeCMake:
    """Stand-in for subprocess.run that records every command."""

    def __init__(self, version: str = "3.22.1"):
        self.version = version
        self.calls: List[List[str]] = []
        self.build_returncode = 0
        self.program_returncode = 0

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        if args[0] != "cmake":
            return Mock(returncode=self.program_returncode)
        if args[1:] == ["--version"]:
            return Mock(
                returncode=0,
                stdout=f"cmake version {self.version}\n\n"
                "CMake suite maintained and supported by Kitware (kitware.com/cmake).\n",
            )
        if args[1] == "--build":
            return Mock(returncode=self.build_returncode)
        return Mock(returncode=0)

    @property
    def configure_calls(self) -> List[List[str]]:
        return [
            c
            for c in self.calls
            if c[0] == "cmake" and c[1].startswith(("-D", "-B"))
        ]

    @property
    def build_calls(self) -> List[List[str]]:
        return [c for c in self.calls if c[0] == "cmake" and c[1] == "--build"]


@pytest.fixture
def fake_cmake() -> Generator[FakeCMake, None, None]:
    """Replace every subprocess.run call with a recording fake."""
    fake = FakeCMake()
    with patch.object(subprocess, "run", side_effect=fake):
        yield fake


@pytest.fixture
def cmake_available() -> bool:
    if shutil.which("cmake") is None:
        pytest.skip("cmake not installed")
    return True
