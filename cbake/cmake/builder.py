"""
CMakeLists.txt builder.

Collects the project settings through chained calls and renders a complete
CMakeLists.txt. Each call returns a new builder, so a partially configured
builder can be shared and extended without affecting other users.

Example:
    >>> text = (
    ...     CMakeListsBuilder("hello", GeneratorProfile.MODERN)
    ...     .cpp_standard(11)
    ...     .sources(["main.cpp"])
    ...     .finalize()
    ... )
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from . import generator
from .generator import GeneratorProfile

logger = logging.getLogger(__name__)

OVERWRITE_WARNING = (
    "-------- Warning: This section will be overwritten by cbake utility. "
    "Don't change it manually if you will use it --------"
)
SECTION_RULE = "-" * len(OVERWRITE_WARNING)


@dataclass(frozen=True)
class CMakeListsBuilder:
    """Immutable accumulator for CMakeLists.txt settings.

    Attributes:
        project_name: Name passed to ``project()``
        profile: Version tier of the target cmake
        source_files: Executable sources, in insertion order
        include_directories: Include directories, in insertion order
        build_type: Build type used when cmake is run without one
        standard: C++ standard as text (e.g. ``"11"``)
    """

    project_name: str
    profile: GeneratorProfile
    source_files: Tuple[str, ...] = ()
    include_directories: Tuple[str, ...] = ()
    build_type: Optional[str] = None
    standard: Optional[str] = None

    def default_build_type(self, build_type: str) -> "CMakeListsBuilder":
        return replace(self, build_type=build_type)

    def cpp_standard(self, standard: int) -> "CMakeListsBuilder":
        return replace(self, standard=str(standard))

    def include_dirs(self, dirs: Iterable[str]) -> "CMakeListsBuilder":
        return replace(
            self, include_directories=self.include_directories + tuple(dirs)
        )

    def sources(self, files: Iterable[str]) -> "CMakeListsBuilder":
        return replace(self, source_files=self.source_files + tuple(files))

    def finalize(self) -> str:
        """Render the complete CMakeLists.txt text."""
        parts = [
            self.profile.min_ver(),
            generator.project(self.project_name),
        ]

        if self.build_type is not None:
            parts.append(generator.default_build_type(self.build_type))

        if self.standard is not None:
            parts.append(generator.set_var(generator.CXX_STANDARD_VAR, self.standard))
            parts.append("\n")

        if self.include_directories:
            parts.append(generator.include_dirs(self.include_directories))

        if self.source_files:
            parts.append(generator.comment(OVERWRITE_WARNING))
            parts.append(generator.add_executable(self.source_files))
            parts.append(generator.comment(SECTION_RULE))

        logger.debug(
            f"Rendered CMakeLists.txt for {self.project_name} "
            f"({self.profile.name}, {len(self.source_files)} sources)"
        )
        return "".join(parts)
