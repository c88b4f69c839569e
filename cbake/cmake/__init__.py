"""
CMake integration module for cbake.

This module provides the version model, CMakeLists.txt text generation,
in-place patching of generated files and cmake process execution.
"""

from .version import Version
from .generator import GeneratorProfile
from .builder import CMakeListsBuilder
from .patch import PatchTarget, reconcile, sync_executable_sources

__all__ = [
    "Version",
    "GeneratorProfile",
    "CMakeListsBuilder",
    "PatchTarget",
    "reconcile",
    "sync_executable_sources",
]
