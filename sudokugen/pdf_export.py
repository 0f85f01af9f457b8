"""
Printable A4 pack of puzzles followed by their solutions.

Pages are drawn with Pillow and written as a multi-page PDF. Geometry is
in millimetres and converted to pixels at `DPI`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from PIL import Image, ImageDraw, ImageFont

from .difficulty import Difficulty
from .grid import SIZE, BOX, as_grid

DPI = 150
PAGE_SIZE_MM = (210, 297)
CELL_MM = 9.2
LEFT_MM = 20
TITLE_Y_MM = 18
TOP_MM = 22
SPACING_MM = 4.5
BOTTOM_LIMIT_MM = 280
TITLE_PT = 16
DIGIT_PT = 14
THIN_MM = 0.2
THICK_MM = 0.5

FONT_CANDIDATES: List[Path] = [
    Path("fonts/DejaVuSans.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/TTF/DejaVuSans.ttf"),
    Path("/Library/Fonts/Arial.ttf"),
    Path("/System/Library/Fonts/Supplemental/Arial.ttf"),
    Path("C:/Windows/Fonts/arial.ttf"),
]


def _px(mm: float) -> int:
    return int(round(mm * DPI / 25.4))


def _pt_to_px(pt: float) -> int:
    return int(round(pt * DPI / 72))


def load_font(size_px: int) -> ImageFont.ImageFont:
    """First loadable font from FONT_CANDIDATES, else Pillow's bundled default."""
    for font_path in FONT_CANDIDATES:
        if not font_path.exists():
            continue
        try:
            return ImageFont.truetype(str(font_path), size_px)
        except OSError:
            continue
    return ImageFont.load_default(size=size_px)


def default_filename(difficulty, count: int) -> str:
    return f"sudoku-{Difficulty.parse(difficulty).value}-{count}-pack.pdf"


def draw_grid(draw: ImageDraw.ImageDraw, board, x: int, y: int, font) -> None:
    """Draw one board with its top-left corner at pixel (x, y)."""
    cell = _px(CELL_MM)
    side = SIZE * cell
    for i in range(SIZE + 1):
        width = max(1, _px(THICK_MM if i % BOX == 0 else THIN_MM))
        draw.line([(x + i * cell, y), (x + i * cell, y + side)], fill=0, width=width)
        draw.line([(x, y + i * cell), (x + side, y + i * cell)], fill=0, width=width)
    draw.rectangle([x, y, x + side, y + side], outline=0, width=max(1, _px(THICK_MM)))

    for r in range(SIZE):
        for c in range(SIZE):
            num = int(board[r][c])
            if num == 0:
                continue
            cx = x + c * cell + cell // 2
            cy = y + r * cell + cell // 2
            draw.text((cx, cy), str(num), font=font, fill=0, anchor="mm")


def render_pages(boards: Sequence, title: str, per_row: int = 2) -> List[Image.Image]:
    """Lay boards out left to right, top to bottom, starting new pages as needed."""
    page_w, page_h = _px(PAGE_SIZE_MM[0]), _px(PAGE_SIZE_MM[1])
    title_font = load_font(_pt_to_px(TITLE_PT))
    digit_font = load_font(_pt_to_px(DIGIT_PT))
    block_mm = SIZE * CELL_MM + SPACING_MM

    rows_per_page = 1
    while TOP_MM + (rows_per_page + 1) * block_mm - SPACING_MM <= BOTTOM_LIMIT_MM:
        rows_per_page += 1
    per_page = rows_per_page * per_row

    pages = []
    for start in range(0, len(boards), per_page):
        page = Image.new("L", (page_w, page_h), color=255)
        draw = ImageDraw.Draw(page)
        draw.text((_px(LEFT_MM), _px(TITLE_Y_MM)), title, font=title_font, fill=0, anchor="ls")
        for index, board in enumerate(boards[start:start + per_page]):
            row, col = divmod(index, per_row)
            x = _px(LEFT_MM + col * block_mm)
            y = _px(TOP_MM + row * block_mm)
            draw_grid(draw, board, x, y, digit_font)
        pages.append(page)
    return pages


def export_pdf(pairs: Iterable, difficulty, path=None, per_row: int = 2) -> str:
    """
    Write the puzzles and then the solutions of `pairs` to a PDF.

    Each pair may be a GeneratedPuzzle or a dict with "puzzle" and
    "solution" grids. Returns the path written.
    """
    difficulty = Difficulty.parse(difficulty)
    puzzles, solutions = [], []
    for pair in pairs:
        if isinstance(pair, dict):
            puzzles.append(as_grid(pair["puzzle"]))
            solutions.append(as_grid(pair["solution"]))
        else:
            puzzles.append(as_grid(pair.puzzle))
            solutions.append(as_grid(pair.solution))
    if not puzzles:
        raise ValueError("Nothing to export: no puzzles given")

    if path is None:
        path = default_filename(difficulty, len(puzzles))
    path = Path(path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    pages = render_pages(puzzles, f"Sudoku Puzzles ({difficulty.label})", per_row)
    pages += render_pages(solutions, f"Sudoku Solutions ({difficulty.label})", per_row)
    pages[0].save(str(path), "PDF", resolution=DPI, save_all=True, append_images=pages[1:])
    return str(path)
