"""
Chessboard Renderer
===================

Renders a static 8×8 chessboard, with optional piece sprites, to a PNG.

Architecture:
    1. Board Colorer       – square index → colour via a fixed bitmask
    2. Sprite Locator      – piece / colour code → cell in the sprite sheet
    3. Notation Translator – "e4" → destination rectangle on the canvas
    4. Compositor          – paint 64 squares, alpha-composite sprites
    5. File I/O            – sprite-sheet PNG in, board PNG out
"""

__version__ = "1.0.0"
