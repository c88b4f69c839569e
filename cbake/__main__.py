"""
Entry point for running cbake as a module.

Usage: python -m cbake [command] [options]
"""

from cbake.cli.parser import main

if __name__ == "__main__":
    main()
