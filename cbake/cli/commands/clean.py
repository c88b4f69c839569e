"""
Clean command implementation.

Empties the build directory, including the cmake cache, and recreates the
per-configuration output directories. The build directory itself stays in
place because it holds the project lock taken for the duration of the clean.
"""

import logging
from pathlib import Path

from cbake.cli.utils import (
    load_config,
    print_status,
    print_success,
    resolve_project_root,
)
from cbake.core.exceptions import CommandError, ProjectLockTimeout
from cbake.core.filesystem import FilesystemError, is_relative_to, safe_rmtree
from cbake.core.locking import LOCK_FILE_NAME, project_lock
from cbake.layout import SimpleLayout

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the clean command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)

    Raises:
        CommandError: If the build directory is outside the project or
            cannot be emptied
    """
    logger.debug(f"Arguments: {args}")

    project_root = resolve_project_root(args.project_root)
    config = load_config(project_root, args.config)
    layout = SimpleLayout(project_root, config.build_dir)
    build_path = layout.build_path

    if build_path.resolve() == project_root or not is_relative_to(
        build_path, project_root
    ):
        raise CommandError(
            "Refusing to clean build directory",
            cause=f"{build_path} is not inside {project_root}",
            help="build.build_dir in cbake.yaml must point inside the project",
        )

    print_status("Cleaning", str(build_path))

    try:
        with project_lock(project_root, build_path):
            clear_build_dir(build_path)
            layout.create_target_dirs()
    except ProjectLockTimeout as e:
        raise CommandError("Cannot lock project", cause=e) from e
    except (FilesystemError, OSError) as e:
        raise CommandError("Cannot clean build directory", cause=e) from e

    print_success()
    return 0


def clear_build_dir(build_path: Path) -> None:
    """Remove everything inside the build directory except the lock file."""
    for entry in build_path.iterdir():
        if entry.name == LOCK_FILE_NAME:
            continue
        if entry.is_dir() and not entry.is_symlink():
            safe_rmtree(entry, require_prefix=build_path)
        else:
            entry.unlink()
        logger.debug(f"Removed {entry}")
