"""
Build command implementation.

Brings the ``add_executable`` declaration of CMakeLists.txt in line with the
sources on disk, then configures and builds with cmake.
"""

import logging

from cbake.cmake import exec as cmake_exec
from cbake.cmake.exec import ConfigureCommand
from cbake.cmake.patch import sync_executable_sources
from cbake.cli.utils import (
    CMAKE_LISTS,
    detect_cmake_version,
    load_config,
    print_failure,
    print_status,
    print_success,
    resolve_project_root,
    validate_project_name,
)
from cbake.core.exceptions import (
    CMakeError,
    CMakeExecutionError,
    CMakeNotFoundError,
    CommandError,
    ProjectLayoutError,
    ProjectLockTimeout,
)
from cbake.core.locking import project_lock
from cbake.layout import SimpleLayout

logger = logging.getLogger(__name__)


def build_type_for(release: bool) -> str:
    return "Release" if release else "Debug"


def run(args) -> int:
    """
    Run the build command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if the build failed)

    Raises:
        CommandError: If the project cannot be prepared for building
    """
    logger.debug(f"Arguments: {args}")

    project_root = resolve_project_root(args.project_root)
    project_name = validate_project_name(project_root)
    config = load_config(project_root, args.config)

    print_status("Building", project_name)

    layout = SimpleLayout(project_root, config.build_dir)
    sync_sources(layout)

    version = detect_cmake_version()
    build_type = build_type_for(args.release)

    output_dir = str(layout.target_path(build_type))
    # Multi-config generators append a per-config subdirectory otherwise
    config_output_var = f"CMAKE_RUNTIME_OUTPUT_DIRECTORY_{build_type.upper()}"
    command = (
        ConfigureCommand(version=version)
        .set_var("CMAKE_BUILD_TYPE", build_type)
        .set_var("CMAKE_RUNTIME_OUTPUT_DIRECTORY", output_dir)
        .set_var(config_output_var, output_dir)
    )

    try:
        command.execute(layout.project_path, layout.build_path)
    except CMakeError as e:
        raise CommandError("Cannot initialize cmake build directory", cause=e) from e

    try:
        cmake_exec.build(layout.build_path, config=build_type)
    except CMakeExecutionError as e:
        logger.debug(f"Build failed: {e}")
        print_failure()
        return 1
    except CMakeNotFoundError as e:
        raise CommandError("Cannot run build command", cause=e) from e

    print_success()
    return 0


def sync_sources(layout: SimpleLayout) -> None:
    """
    Rewrite the executable's source list in CMakeLists.txt.

    The rest of the file is left as the user wrote it. The file is only
    rewritten when the source list actually changed.

    Raises:
        CommandError: If sources or CMakeLists.txt cannot be read or written
    """
    try:
        with project_lock(layout.project_path, layout.build_path):
            sources = layout.collect_sources()
            if not sources:
                raise CommandError(
                    "Cannot collect project sources",
                    help="Add at least one .cpp, .c, .h or .hpp file to the project root",
                )

            try:
                cmake_lists = layout.read_file(CMAKE_LISTS)
            except OSError as e:
                raise CommandError(
                    "Cannot read CMakeLists.txt",
                    cause=e,
                    help="Make sure you are located within a project directory",
                ) from e

            updated, replaced = sync_executable_sources(cmake_lists, sources)
            if not replaced:
                logger.info("No add_executable declaration found, appending one")

            if updated != cmake_lists:
                layout.write_file(CMAKE_LISTS, updated)
                logger.debug(f"Updated {CMAKE_LISTS} with {len(sources)} sources")
    except ProjectLayoutError as e:
        raise CommandError("Cannot collect project sources", cause=e) from e
    except ProjectLockTimeout as e:
        raise CommandError("Cannot lock project", cause=e) from e
    except OSError as e:
        raise CommandError("Cannot write CMakeLists.txt", cause=e) from e
