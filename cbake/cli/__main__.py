"""
Entry point for running cbake CLI as a module.

Usage: python -m cbake.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
