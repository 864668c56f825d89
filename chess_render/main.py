"""
Chessboard Renderer – Main Entry Point
======================================

Running with no arguments reproduces the stock batch job: load
``ChessPiecesArray.png``, draw a black knight on a1 of a 640×640 board
and write ``image.png``.

Usage examples
--------------

**Default board**::

    python render_board.py

**Custom pieces**::

    python render_board.py --place b:na1 --place w:ke1 --place w:e4

**From a FEN position**::

    python render_board.py \\
        --fen "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1" \\
        --output opening.png

**From a JSON placements file**::

    python render_board.py --placements-file position.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from chess_render.config import (
    CANVAS_SIZE,
    OUTPUT_PATH,
    SPRITE_SHEET,
    RenderConfig,
)
from chess_render.errors import ChessRenderError, InvalidNotationError
from chess_render.rendering.compositor import render_board, save_png
from chess_render.rendering.placements import (
    Placement,
    load_placements,
    parse_placement,
    parse_placements,
    placements_from_fen,
)
from chess_render.sprites.locator import SPRITE_SIZE
from chess_render.sprites.sheet import SpriteSheet

log = logging.getLogger("chess_render")


# ═══════════════════════════════════════════════════════════════════════
# Placement sources
# ═══════════════════════════════════════════════════════════════════════

def parse_place_arg(value: str) -> Placement:
    """Parse a ``--place`` value such as ``"b:na1"`` or ``"w:e4"``."""
    color, sep, notation = value.partition(":")
    if not sep:
        raise InvalidNotationError(
            f"wrong placement {value!r}, expected format \"w:ne4\""
        )
    return parse_placement(color, notation)


def collect_placements(args: argparse.Namespace, config: RenderConfig) -> List[Placement]:
    """Gather placements in order: FEN, placements file, ``--place`` flags."""
    if args.fen is None and args.placements_file is None and not args.place:
        return [] if args.empty else parse_placements(config.placements)

    placements: List[Placement] = []
    if args.fen is not None:
        placements.extend(placements_from_fen(args.fen))
    if args.placements_file is not None:
        placements.extend(load_placements(args.placements_file))
    placements.extend(parse_place_arg(p) for p in args.place)
    return placements


# ═══════════════════════════════════════════════════════════════════════
# Render
# ═══════════════════════════════════════════════════════════════════════

def run(args: argparse.Namespace) -> Path:
    """Render one board and write it to disk."""
    config = RenderConfig(
        canvas_size=args.size,
        sprite_size=args.sprite_size,
        sprite_sheet=Path(args.sheet),
        output_path=Path(args.output),
    )
    placements = collect_placements(args, config)
    log.info(
        "Rendering %dx%d board with %d piece(s)",
        config.canvas_size, config.canvas_size, len(placements),
    )

    sheet = None
    if placements:
        sheet = SpriteSheet.load(config.sprite_sheet, sprite_size=config.sprite_size)

    image = render_board(config, placements, sheet)
    out = save_png(image, config.output_path)
    log.info("Board saved to %s", out)
    return out


# ═══════════════════════════════════════════════════════════════════════
# CLI
# ═══════════════════════════════════════════════════════════════════════

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess_render",
        description="Render a chessboard with piece sprites to a PNG.",
    )
    parser.add_argument("--sheet", default=SPRITE_SHEET,
                        help="Path to the piece sprite sheet PNG")
    parser.add_argument("--output", default=OUTPUT_PATH,
                        help="Output PNG path (overwritten)")
    parser.add_argument("--size", type=int, default=CANVAS_SIZE,
                        help="Canvas edge in pixels, a multiple of 8")
    parser.add_argument("--sprite-size", type=int, default=SPRITE_SIZE,
                        help="Edge of one sprite-sheet cell in pixels")
    parser.add_argument("--place", action="append", default=[],
                        metavar="COLOR:NOTATION",
                        help="Piece to draw, e.g. b:na1 or w:e4 (repeatable)")
    parser.add_argument("--placements-file", default=None,
                        help="JSON list of {color, square, piece} records")
    parser.add_argument("--fen", default=None,
                        help="FEN string whose piece placement is drawn")
    parser.add_argument("--empty", action="store_true",
                        help="Draw the bare board when no pieces are given")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        run(args)
    except ChessRenderError as exc:
        log.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
