"""
Sudoku Generator - command line front end.
"""

import argparse
import json
import os
import sys

from .analyzer import entry_error_mask
from .difficulty import Difficulty
from .generator import GenerationError, PuzzleGenerator
from .grid import format_board
from .pdf_export import default_filename, export_pdf
from .rendering import save_board_image


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Sudoku Generator - puzzles, solutions and printable packs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Print one easy puzzle:
    python -m sudokugen

  Print a hard puzzle together with its solution:
    python -m sudokugen --difficulty hard --show-solution

  Build a printable pack of six medium puzzles:
    python -m sudokugen -d medium -n 6 --pdf

  Reproducible output:
    python -m sudokugen --seed 42 --json
        """
    )

    parser.add_argument('--difficulty', '-d', default='easy',
                        choices=[d.value for d in Difficulty],
                        help='Difficulty preset (default: easy)')
    parser.add_argument('--count', '-n', type=int, default=1,
                        help='Number of puzzles to generate (default: 1)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for reproducible generation')
    parser.add_argument('--show-solution', action='store_true',
                        help='Print each solution below its puzzle')
    parser.add_argument('--json', action='store_true',
                        help='Print puzzles as JSON instead of text grids')
    parser.add_argument('--output', '-o', default='output',
                        help='Output directory for PDF and image files (default: output)')
    parser.add_argument('--pdf', nargs='?', const='', default=None, metavar='FILE',
                        help='Write a PDF pack (default name: sudoku-<difficulty>-<count>-pack.pdf)')
    parser.add_argument('--image', nargs='?', const='', default=None, metavar='DIR',
                        help='Save a PNG of every puzzle and solution (default directory: --output)')
    return parser


def run(args) -> int:
    if args.count < 1:
        print(f"Error: --count must be a positive integer, got {args.count}")
        return 1

    difficulty = Difficulty.parse(args.difficulty)
    generator = PuzzleGenerator(seed=args.seed)

    try:
        pairs = generator.generate_many(difficulty, args.count)
    except GenerationError as e:
        print(f"\nError during generation: {str(e)}")
        return 1

    if args.json:
        print(json.dumps([pair.to_dict() for pair in pairs], indent=2))
    else:
        for i, pair in enumerate(pairs, 1):
            print(f"\n[{i}/{len(pairs)}] {difficulty.label} puzzle "
                  f"({pair.clue_count} clues, filled in {pair.steps} steps)")
            print(format_board(pair.puzzle))
            if args.show_solution:
                print("\n      Solution:")
                print(format_board(pair.solution))

    if args.pdf is not None:
        os.makedirs(args.output, exist_ok=True)

    if args.image is not None:
        image_dir = args.image or args.output
        os.makedirs(image_dir, exist_ok=True)
        for i, pair in enumerate(pairs, 1):
            stem = os.path.join(image_dir, f"sudoku_{difficulty.value}_{i:02d}")
            save_board_image(f"{stem}_puzzle.png", pair.puzzle)
            errors = entry_error_mask(pair.solution, pair.puzzle)
            if errors.any():
                print(f"      ✗ Solution {i} has conflicting cells: {int(errors.sum())}")
            save_board_image(f"{stem}_solution.png", pair.solution, pair.puzzle, errors)
        if not args.json:
            print(f"\n✓ Saved {2 * len(pairs)} images to: {image_dir}/")

    if args.pdf is not None:
        name = args.pdf or default_filename(difficulty, len(pairs))
        path = export_pdf(pairs, difficulty, os.path.join(args.output, name))
        if not args.json:
            print(f"✓ PDF written to: {path}")

    return 0


def main(argv=None):
    """
    Main entry point for the Sudoku Generator.

    Handles command-line arguments and prints or exports puzzles.
    """
    args = build_parser().parse_args(argv)
    try:
        status = run(args)
    except (OSError, ValueError) as e:
        print(f"\nError: {str(e)}")
        status = 1
    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
