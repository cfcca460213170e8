"""
Entry point for running zigcmake as a module.

Usage: python -m zigcmake [options]
"""

from zigcmake.cli.parser import main

if __name__ == "__main__":
    main()
