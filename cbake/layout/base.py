"""
Project layout interface for cbake.

A layout knows where sources, build output and the top-level CMakeLists.txt
live for one project, and how to create them. Every operation works on
explicit paths below the project root.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

SOURCE_EXTENSIONS = (".cpp", ".h", ".hpp", ".c")

MAIN_CPP_CONTENTS = """\
#include <iostream>

int main()
{
    std::cout << "Hello, World!" << std::endl;
    return 0;
}
"""


class ProjectLayout(ABC):
    """Abstract base class for project layouts."""

    @abstractmethod
    def generate(self) -> None:
        """Create the project directories and template files."""
        pass

    @abstractmethod
    def collect_include_dirs(self) -> List[str]:
        pass

    @abstractmethod
    def collect_sources(self) -> List[str]:
        pass

    @property
    @abstractmethod
    def build_path(self) -> Path:
        pass

    @property
    @abstractmethod
    def project_path(self) -> Path:
        """Directory holding the uppermost CMakeLists.txt."""
        pass

    @abstractmethod
    def write_file(self, file_name: str, contents: str) -> Path:
        pass

    @abstractmethod
    def read_file(self, file_name: str) -> str:
        pass

    @abstractmethod
    def create_dir(self, dir_name: str) -> Path:
        pass
