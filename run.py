#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine CLI
"""

import sys

from connect4_engine.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
