#!/usr/bin/env python3
"""
Convenience script to generate Sudoku puzzles.

Usage:
    python generate_puzzles.py
    python generate_puzzles.py --difficulty hard --count 6 --pdf
"""

import sys
import os

# Add repo root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudokugen.cli import main

if __name__ == '__main__':
    main()
