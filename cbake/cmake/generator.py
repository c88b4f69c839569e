"""
CMakeLists.txt text fragments.

Every function here maps its arguments to a piece of CMake text. They hold no
state and never fail; argument validation belongs to the caller.

The generator profile selects the version tier of the installed cmake and
supplies the matching ``cmake_minimum_required`` line.
"""

from enum import Enum
from typing import Sequence

from .version import Version

PROJECT_NAME_MACRO = "${PROJECT_NAME}"
CXX_STANDARD_VAR = "CMAKE_CXX_STANDARD"
BUILD_TYPE_VAR = "CMAKE_BUILD_TYPE"

# Version independent commands


def min_ver(version: Version) -> str:
    return f"cmake_minimum_required(VERSION {version})\n\n"


def set_var(var_name: str, var_val: str) -> str:
    return f"set({var_name} {var_val})\n"


def project(name: str) -> str:
    return f"project({name})\n\n"


def comment(text: str) -> str:
    return f"#{text}\n"


def default_build_type(build_type: str) -> str:
    """Set the build type only when the user did not pass one to cmake."""
    return (
        f"\nif(NOT {BUILD_TYPE_VAR})\n"
        f'    set({BUILD_TYPE_VAR} "{build_type}")\n'
        "endif()\n\n"
    )


def include_dirs(dir_names: Sequence[str]) -> str:
    dir_list = "\n    ".join(dir_names)
    return f"include_directories(\n    {dir_list}\n)\n\n"


def add_executable(sources: Sequence[str]) -> str:
    source_list = "\n    ".join(sources)
    return f"\nadd_executable({PROJECT_NAME_MACRO}\n    {source_list}\n)\n\n"


# Version dependent commands

MODERN_THRESHOLD = Version(3, 0)


class GeneratorProfile(Enum):
    """
    Version tier of the target cmake.

    The enum value is the minimum cmake version written into generated files.
    """

    LEGACY = "2.8"
    MODERN = "3.1"

    @classmethod
    def from_version(cls, version: Version) -> "GeneratorProfile":
        """Pick the tier for a detected cmake version."""
        if version < MODERN_THRESHOLD:
            return cls.LEGACY
        return cls.MODERN

    @property
    def version(self) -> Version:
        return Version.parse(self.value)

    def min_ver(self) -> str:
        return min_ver(self.version)


def from_version(version: Version) -> GeneratorProfile:
    return GeneratorProfile.from_version(version)
