"""
New command implementation.

Creates a project directory with a hello-world source, CMakeLists.txt and
cbake.yaml, then initializes the cmake build directory.
"""

import logging
from pathlib import Path

from cbake.cmake.exec import ConfigureCommand
from cbake.cli.utils import (
    CMAKE_LISTS,
    detect_cmake_version,
    print_status,
    print_success,
    render_cmake_lists,
    validate_project_name,
)
from cbake.config import ProjectConfig, config_path_for, write_project_config
from cbake.core.exceptions import CMakeError, CommandError, ProjectLayoutError
from cbake.layout import SimpleLayout

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the new command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)

    Raises:
        CommandError: If any step fails
    """
    logger.debug(f"Arguments: {args}")

    project_root = Path(args.path).resolve()
    project_name = validate_project_name(project_root)

    version = detect_cmake_version()

    print_status("Creating", project_name)

    config = ProjectConfig(default_build_type=args.build_type)
    if args.cpp_standard is not None:
        config.cpp_standard = args.cpp_standard

    layout = SimpleLayout(project_root, config.build_dir)

    try:
        layout.generate()
        sources = layout.collect_sources()
    except (ProjectLayoutError, OSError) as e:
        raise CommandError("Cannot generate a project layout", cause=e) from e

    cmake_lists = render_cmake_lists(project_name, version, config, sources)

    try:
        layout.write_file(CMAKE_LISTS, cmake_lists)
        write_project_config(config_path_for(project_root, args.config), config)
    except OSError as e:
        raise CommandError("Cannot write CMakeLists.txt", cause=e) from e

    try:
        ConfigureCommand(version=version).execute(
            layout.project_path, layout.build_path
        )
    except CMakeError as e:
        raise CommandError("Cannot initialize cmake build directory", cause=e) from e

    print_success()
    return 0
