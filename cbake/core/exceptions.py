"""
Centralized exception hierarchy for cbake.

Core text generation never raises; everything here originates from version
parsing, configuration files, the filesystem or the cmake process.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class CbakeError(Exception):
    """Base exception for all cbake errors."""

    pass


# ============================================================================
# Version Exceptions
# ============================================================================


class MalformedVersionError(CbakeError, ValueError):
    """Given string is not a cmake version."""

    def __init__(self, text: str, reason: str = ""):
        self.text = text
        self.reason = reason
        msg = f"Given string is not a cmake version: {text!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(CbakeError):
    """Raised when cbake.yaml is unreadable or has invalid values."""

    pass


# ============================================================================
# Project Layout Exceptions
# ============================================================================


class ProjectLayoutError(CbakeError):
    """Raised when project files or directories cannot be created or read."""

    pass


class ProjectLockTimeout(CbakeError):
    """Raised when another cbake process holds the project lock."""

    pass


# ============================================================================
# CMake Exceptions
# ============================================================================


class CMakeError(CbakeError):
    """Base exception for cmake invocation errors."""

    pass


class CMakeNotFoundError(CMakeError):
    """Raised when the cmake executable cannot be found."""

    def __init__(self, executable: str = "cmake"):
        self.executable = executable
        super().__init__(f"{executable} not found in PATH")


class CMakeExecutionError(CMakeError):
    """Raised when cmake exits with a non-zero status."""

    def __init__(self, returncode: int):
        self.returncode = returncode
        super().__init__(f"cmake failed with exit code: {returncode}")


# ============================================================================
# Command Exceptions
# ============================================================================


class CommandError(CbakeError):
    """
    Fatal error that prevents a command from completing.

    Carries a short description of what failed, the underlying cause and an
    optional hint shown to the user.
    """

    def __init__(
        self,
        what: str,
        cause: Optional[BaseException] = None,
        help: Optional[str] = None,
    ):
        self.what = what
        self.cause = cause
        self.help = help
        msg = what if cause is None else f"{what} ({cause})"
        super().__init__(msg)
