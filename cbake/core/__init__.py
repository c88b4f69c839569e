"""
Core infrastructure for cbake.

Provides the exception hierarchy, safe file operations and project locking
shared by the CLI commands.
"""

from .exceptions import (
    CbakeError,
    CMakeError,
    CMakeExecutionError,
    CMakeNotFoundError,
    CommandError,
    ConfigurationError,
    MalformedVersionError,
    ProjectLayoutError,
    ProjectLockTimeout,
)

__all__ = [
    "CbakeError",
    "CMakeError",
    "CMakeExecutionError",
    "CMakeNotFoundError",
    "CommandError",
    "ConfigurationError",
    "MalformedVersionError",
    "ProjectLayoutError",
    "ProjectLockTimeout",
]
