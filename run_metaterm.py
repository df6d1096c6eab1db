#!/usr/bin/env python3
"""
metaterm — quick launcher.

Usage:
    python run_metaterm.py [options]

Run ``python run_metaterm.py --help`` for full options.
"""

from metaterm.app import main

if __name__ == "__main__":
    main()
