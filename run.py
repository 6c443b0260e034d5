#!/usr/bin/env python3
import sys
import os

# Add project directory to Python path (needed before importing marquee)
project_dir = os.path.dirname(os.path.abspath(__file__))
if project_dir not in sys.path:
    sys.path.insert(0, project_dir)

from marquee.cli import main

if __name__ == "__main__":
    sys.exit(main())
