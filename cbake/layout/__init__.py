"""
Project layouts for cbake.
"""

from .base import MAIN_CPP_CONTENTS, SOURCE_EXTENSIONS, ProjectLayout
from .simple import SimpleLayout

__all__ = ["MAIN_CPP_CONTENTS", "SOURCE_EXTENSIONS", "ProjectLayout", "SimpleLayout"]
