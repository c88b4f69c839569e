"""
Init command implementation.

Initializes cbake in an existing directory: sources already present are
picked up, an empty directory gets a hello-world main.cpp.
"""

import logging

from cbake.cmake.exec import ConfigureCommand
from cbake.cli.utils import (
    CMAKE_LISTS,
    detect_cmake_version,
    load_config,
    print_status,
    print_success,
    render_cmake_lists,
    resolve_project_root,
    validate_project_name,
)
from cbake.config import config_path_for, write_project_config
from cbake.core.exceptions import CMakeError, CommandError, ProjectLayoutError
from cbake.layout import MAIN_CPP_CONTENTS, SimpleLayout

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the init command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)

    Raises:
        CommandError: If any step fails
    """
    logger.debug(f"Arguments: {args}")

    project_root = resolve_project_root(args.project_root)
    project_name = validate_project_name(project_root)

    if (project_root / CMAKE_LISTS).exists() and not args.force:
        raise CommandError(
            "Project already initialized",
            help=f"{project_root / CMAKE_LISTS} exists. Use --force to regenerate it",
        )

    config_file = config_path_for(project_root, args.config)
    config = load_config(project_root, args.config)
    version = detect_cmake_version()

    print_status("Initializing", project_name)

    layout = SimpleLayout(project_root, config.build_dir)

    try:
        sources = layout.collect_sources()
        if not sources:
            logger.info("No sources found, creating main.cpp")
            layout.write_file("main.cpp", MAIN_CPP_CONTENTS)
            sources = ["main.cpp"]
        include_dirs = layout.collect_include_dirs()
        layout.create_target_dirs()
    except (ProjectLayoutError, OSError) as e:
        raise CommandError("Cannot generate a project layout", cause=e) from e

    cmake_lists = render_cmake_lists(
        project_name, version, config, sources, include_dirs
    )

    try:
        layout.write_file(CMAKE_LISTS, cmake_lists)
        if not config_file.exists():
            write_project_config(config_file, config)
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
