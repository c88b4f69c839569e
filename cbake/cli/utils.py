"""
Shared utilities for CLI commands.

Provides console reporting, project name validation and the CMakeLists.txt
rendering shared by the ``new`` and ``init`` commands.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from cbake.cmake import exec as cmake_exec
from cbake.cmake.builder import CMakeListsBuilder
from cbake.cmake.generator import GeneratorProfile
from cbake.cmake.version import Version
from cbake.config import ProjectConfig, load_project_config
from cbake.core.exceptions import (
    CMakeNotFoundError,
    CommandError,
    ConfigurationError,
    MalformedVersionError,
)

logger = logging.getLogger(__name__)

CMAKE_LISTS = "CMakeLists.txt"

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def print_status(verb: str, subject: Optional[str] = None):
    """Print a ``  Verb subject`` progress line."""
    line = Text("  ")
    line.append(verb, style="bold green")
    if subject:
        line.append(" ")
        line.append(subject, style="bold white")
    console.print(line)


def print_success():
    print_status("Success")


def print_failure():
    err_console.print(Text("  Failure", style="bold red"))


def print_error(error: CommandError):
    """
    Print a fatal error to stderr.

    Args:
        error: Error with description, cause and optional help hint
    """
    line = Text("  ")
    line.append("Error:", style="bold red")
    line.append(f" {error.what}")
    if error.cause is not None:
        line.append(f" ({error.cause})")
    err_console.print(line)

    if error.help:
        hint = Text("  ")
        hint.append("Help:", style="bold yellow")
        hint.append(f" {error.help}")
        err_console.print(hint)


# ============================================================================
# Project Helpers
# ============================================================================


def resolve_project_root(path: Optional[Path] = None) -> Path:
    """
    Resolve project root directory.

    Args:
        path: Optional path (defaults to current directory)

    Returns:
        Resolved absolute path
    """
    if path is None:
        path = Path.cwd()
    return Path(path).resolve()


def validate_project_name(project_path: Path) -> str:
    """
    Derive the project name from the last path component.

    Raises:
        CommandError: If the path has no final component or the name is not
            ASCII without whitespace
    """
    name = project_path.name
    if not name:
        raise CommandError(
            "Cannot parse a project name",
            help="This command creates a new directory with project contents. "
            "The path must end with a non existing directory name",
        )

    if not name.isascii() or any(ch.isspace() for ch in name):
        raise CommandError(
            "Project name verification failed",
            help="Project name must consist only of ASCII characters excluding whitespaces",
        )

    return name


def detect_cmake_version() -> Version:
    """Detect installed cmake, translating failures into a user-facing error."""
    try:
        return cmake_exec.detect_version()
    except (CMakeNotFoundError, MalformedVersionError) as e:
        raise CommandError(
            "Cannot obtain a cmake version",
            cause=e,
            help="Make sure cmake is installed and present in PATH environment "
            "variable. Run `cmake --version` to verify cmake installation",
        ) from e


def load_config(
    project_root: Path, config_file: Optional[Path] = None
) -> ProjectConfig:
    try:
        return load_project_config(project_root, config_file)
    except ConfigurationError as e:
        raise CommandError("Cannot load project configuration", cause=e) from e


def render_cmake_lists(
    project_name: str,
    version: Version,
    config: ProjectConfig,
    sources: Sequence[str],
    include_dirs: Sequence[str] = (),
) -> str:
    """
    Render a fresh CMakeLists.txt for the detected cmake version.

    Args:
        project_name: Name passed to ``project()``
        version: Detected cmake version
        config: Project settings
        sources: Source files for the executable
        include_dirs: Extra include directories, after the configured ones

    Returns:
        CMakeLists.txt text
    """
    profile = GeneratorProfile.from_version(version)
    logger.debug(f"Using {profile.name} generator profile for cmake {version}")

    builder = CMakeListsBuilder(project_name, profile)
    if config.default_build_type:
        builder = builder.default_build_type(config.default_build_type)
    if config.cpp_standard is not None:
        builder = builder.cpp_standard(config.cpp_standard)

    all_include_dirs: List[str] = list(config.include_dirs) + list(include_dirs)
    return builder.include_dirs(all_include_dirs).sources(sources).finalize()


def exe_name(target: str) -> str:
    return f"{target}.exe" if os.name == "nt" else target
