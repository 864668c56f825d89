"""
Root entry point – delegates to the chess_render package.

Usage:
    python render_board.py
    python render_board.py --place b:na1 --place w:e4 --output board.png
    python render_board.py --fen "8/8/8/8/8/8/8/N7" --size 800
"""

from chess_render.main import main

if __name__ == "__main__":
    main()
