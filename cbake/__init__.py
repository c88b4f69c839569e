"""
cbake - let me bake cmake for you.

Scaffolds minimal C/C++ projects, generates CMakeLists.txt for the installed
cmake version and drives the configure and build steps.
"""

__version__ = "0.1.0"
