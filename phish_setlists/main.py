#!/usr/bin/env python3
"""
Phish Setlists Main Entry Point

This module serves as the console-script entry point for the package.
It provides a minimal delegator to the CLI module without import-time side effects.
"""

from .cli import main


if __name__ == "__main__":
    main()
