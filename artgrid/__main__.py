#!/usr/bin/env python3
"""
Module: artgrid.__main__

Allows the package to be executed as a module using:
    python -m artgrid
"""

import sys

from artgrid.main import main

if __name__ == "__main__":
    sys.exit(main())
