"""
Project-level locking for cbake.

Two cbake processes working on the same project (for example an editor task
and a terminal) must not interleave the read-patch-write cycle on
CMakeLists.txt. The lock is a `filelock` lock file inside the build directory.

Usage:
    from cbake.core.locking import project_lock

    with project_lock(project_root, build_dir):
        text = (project_root / "CMakeLists.txt").read_text()
        ...
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from filelock import FileLock, Timeout as LockTimeout

from .exceptions import ProjectLockTimeout

logger = logging.getLogger(__name__)

LOCK_FILE_NAME = ".cbake.lock"


def lock_path_for(project_root: Path, build_dir: Optional[Path] = None) -> Path:
    """Return the lock file location for a project."""
    if build_dir is None:
        build_dir = project_root / "build"
    elif not build_dir.is_absolute():
        build_dir = project_root / build_dir
    return build_dir / LOCK_FILE_NAME


@contextmanager
def project_lock(
    project_root: Path, build_dir: Optional[Path] = None, timeout: float = 10
):
    """
    Acquire the project lock for CMakeLists.txt modifications.

    Args:
        project_root: Project root directory
        build_dir: Build directory holding the lock file (default: <root>/build)
        timeout: Maximum wait time in seconds (default: 10)

    Yields:
        None

    Raises:
        ProjectLockTimeout: If lock can't be acquired within timeout
    """
    lock_path = lock_path_for(Path(project_root), build_dir)
    lock_path.parent.mkdir(parents=True, exist_ok=True)

    lock = FileLock(lock_path, timeout=timeout)

    try:
        with lock:
            logger.debug(f"Acquired project lock: {lock_path}")
            yield
            logger.debug(f"Released project lock: {lock_path}")
    except LockTimeout as e:
        logger.error(f"Could not acquire project lock after {timeout}s.")
        raise ProjectLockTimeout(
            f"Could not acquire project lock after {timeout}s. "
            "Another cbake process may be running."
        ) from e
