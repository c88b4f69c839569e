"""
Run command implementation.

Builds the project and runs the resulting executable, returning its exit
code.
"""

import logging
import subprocess

from cbake.cli.commands import build
from cbake.cli.utils import (
    exe_name,
    load_config,
    print_status,
    resolve_project_root,
    validate_project_name,
)
from cbake.core.exceptions import CommandError
from cbake.layout import SimpleLayout

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the run command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code of the build if it failed, otherwise of the executable
    """
    result = build.run(args)
    if result != 0:
        return result

    project_root = resolve_project_root(args.project_root)
    project_name = validate_project_name(project_root)
    config = load_config(project_root, args.config)

    print_status("Running", project_name)

    layout = SimpleLayout(project_root, config.build_dir)
    build_type = build.build_type_for(args.release)
    executable = layout.target_path(build_type) / exe_name(project_name)

    logger.debug(f"Executing {executable}")
    try:
        completed = subprocess.run([str(executable)], cwd=project_root)
    except OSError as e:
        raise CommandError(
            "Cannot run executable",
            cause=e,
            help=f"Expected the build to produce {executable}",
        ) from e

    return completed.returncode
