"""
Runs cmake commands.

Output of configure and build steps is streamed straight to the terminal;
only ``cmake --version`` is captured.
"""

import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from cbake.core.exceptions import (
    CMakeExecutionError,
    CMakeNotFoundError,
    MalformedVersionError,
)

from .version import Version

logger = logging.getLogger(__name__)

CMAKE = "cmake"

# Versions like 1.2 or 1.2.3
VERSION_PATTERN = re.compile(r"\d+(?:\.\d+){1,2}")

# First release accepting -S for the source directory
SOURCE_FLAG_VERSION = Version(3, 13)


def detect_version(cmake: str = CMAKE) -> Version:
    """
    Detect the installed cmake version.

    Args:
        cmake: cmake executable name or path

    Returns:
        Parsed version

    Raises:
        CMakeNotFoundError: If cmake cannot be executed
        MalformedVersionError: If the output holds no version number
    """
    try:
        result = subprocess.run(
            [cmake, "--version"], capture_output=True, text=True, check=False
        )
    except FileNotFoundError as e:
        raise CMakeNotFoundError(cmake) from e

    match = VERSION_PATTERN.search(result.stdout)
    if match is None:
        raise MalformedVersionError(result.stdout.strip(), "no version in cmake output")

    version = Version.parse(match.group(0))
    logger.debug(f"Detected cmake {version}")
    return version


def _run(args: List[str]) -> None:
    logger.debug(f"CMake command: {' '.join(args)}")
    try:
        result = subprocess.run(args)
    except FileNotFoundError as e:
        raise CMakeNotFoundError(args[0]) from e

    if result.returncode != 0:
        raise CMakeExecutionError(result.returncode)


@dataclass(frozen=True)
class ConfigureCommand:
    """
    A cmake configure invocation with ``-D`` cache definitions.

    Example:
        >>> (ConfigureCommand()
        ...     .set_var("CMAKE_BUILD_TYPE", "Debug")
        ...     .execute(Path("hello"), Path("hello/build")))
    """

    variables: Tuple[Tuple[str, str], ...] = ()
    version: Optional[Version] = None
    cmake: str = CMAKE

    def set_var(self, name: str, value: str) -> "ConfigureCommand":
        return ConfigureCommand(
            self.variables + ((name, value),), self.version, self.cmake
        )

    def source_flag(self) -> str:
        if self.version is not None and self.version < SOURCE_FLAG_VERSION:
            return "-H"
        return "-S"

    def arguments(self, source_dir: Path, build_dir: Path) -> List[str]:
        args = [self.cmake]
        args.extend(f"-D{name}={value}" for name, value in self.variables)
        args.append(f"-B{build_dir}")
        args.append(f"{self.source_flag()}{source_dir}")
        return args

    def execute(self, source_dir: Path, build_dir: Path) -> None:
        """
        Run the configure step.

        Raises:
            CMakeNotFoundError: If cmake cannot be executed
            CMakeExecutionError: If cmake exits with a non-zero status
        """
        _run(self.arguments(source_dir, build_dir))


def configure(
    source_dir: Path, build_dir: Path, version: Optional[Version] = None
) -> None:
    """Initialize a cmake build directory without extra definitions."""
    ConfigureCommand(version=version).execute(source_dir, build_dir)


def build(build_dir: Path, config: Optional[str] = None, cmake: str = CMAKE) -> None:
    """
    Run ``cmake --build`` in an already configured build directory.

    Args:
        build_dir: Configured build directory
        config: Configuration to build; multi-config generators (Visual
            Studio, Xcode) otherwise fall back to Debug
        cmake: cmake executable name or path
    """
    args = [cmake, "--build", str(build_dir)]
    if config is not None:
        args.extend(["--config", config])
    _run(args)
