#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four terminal game

Examples:
    python run.py play
    python run.py play --no-animation --no-color
    python run.py show --position 0,0,0,...
    python run.py --debug benchmark --iterations 500
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
