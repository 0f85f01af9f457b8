"""
Entry point for running the sudokugen module as a package.

Usage:
    python -m sudokugen --difficulty hard --count 6 --pdf
"""

from .cli import main

if __name__ == '__main__':
    main()
