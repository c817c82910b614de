#!/usr/bin/env python3
"""
Phish Setlists - Entry Point Wrapper

Simple wrapper script so the client can be run from a checkout without
installing the package.
"""

import sys

from phish_setlists.cli import main as cli_main

def main():
    """Main entry point that delegates to the package CLI."""
    try:
        cli_main()
    except KeyboardInterrupt:
        sys.exit(130)  # Standard exit code for Ctrl+C

__all__ = ['main']

if __name__ == "__main__":
    main()
