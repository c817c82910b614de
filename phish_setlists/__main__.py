#!/usr/bin/env python3
"""
Enable execution of the phish_setlists package as a module.

This allows running the package with: python -m phish_setlists
"""

from .cli.main import main

if __name__ == "__main__":
    main()
