"""
Single-directory project layout.

    ProjectRoot/
        build/
            Debug/
            Release/
            build files...
        source files...
        CMakeLists.txt
"""

import logging
from pathlib import Path
from typing import List, Union

from cbake.core.exceptions import ProjectLayoutError
from cbake.core.filesystem import atomic_write, ensure_directory

from .base import MAIN_CPP_CONTENTS, SOURCE_EXTENSIONS, ProjectLayout

logger = logging.getLogger(__name__)

BUILD_PATH = "build"
DEBUG_TARGET_PATH = "Debug"
RELEASE_TARGET_PATH = "Release"


class SimpleLayout(ProjectLayout):
    """All sources sit next to CMakeLists.txt in the project root."""

    def __init__(
        self, project_root: Union[str, Path], build_dir: Union[str, Path] = BUILD_PATH
    ):
        self.project_root = Path(project_root)
        self.build_dir = Path(build_dir)

    def generate(self) -> None:
        """
        Create a new project directory with a hello-world main.cpp.

        Raises:
            ProjectLayoutError: If the project directory already exists
        """
        try:
            self.project_root.mkdir(parents=True)
        except FileExistsError as e:
            raise ProjectLayoutError(
                f"Project directory already exists: {self.project_root}"
            ) from e

        self.create_target_dirs()
        self.write_file("main.cpp", MAIN_CPP_CONTENTS)
        logger.debug(f"Generated simple layout at {self.project_root}")

    def create_target_dirs(self) -> None:
        ensure_directory(self.target_path(DEBUG_TARGET_PATH))
        ensure_directory(self.target_path(RELEASE_TARGET_PATH))

    def collect_include_dirs(self) -> List[str]:
        return []

    def collect_sources(self) -> List[str]:
        """
        List source files in the project root, sorted by name.

        Raises:
            ProjectLayoutError: If the project root cannot be read
        """
        try:
            entries = list(self.project_root.iterdir())
        except OSError as e:
            raise ProjectLayoutError(
                f"Cannot read project directory {self.project_root}: {e}"
            ) from e

        sources = sorted(
            entry.name
            for entry in entries
            if entry.is_file() and entry.suffix in SOURCE_EXTENSIONS
        )
        logger.debug(f"Collected {len(sources)} sources from {self.project_root}")
        return sources

    @property
    def build_path(self) -> Path:
        if self.build_dir.is_absolute():
            return self.build_dir
        return self.project_root / self.build_dir

    @property
    def project_path(self) -> Path:
        return self.project_root

    def target_path(self, build_type: str) -> Path:
        """Directory receiving executables for a build type."""
        return self.build_path / build_type

    def write_file(self, file_name: str, contents: str) -> Path:
        path = self.project_root / file_name
        atomic_write(path, contents)
        return path

    def read_file(self, file_name: str) -> str:
        return (self.project_root / file_name).read_text(encoding="utf-8")

    def create_dir(self, dir_name: str) -> Path:
        path = self.project_root / dir_name
        path.mkdir()
        return path
