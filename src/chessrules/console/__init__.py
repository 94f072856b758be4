"""Console adapter — text prompts and ASCII board over the game layer."""

from chessrules.console.directions import Direction, parse_direction
from chessrules.console.render import render_board, render_living
from chessrules.console.session import ConsoleSession

__all__ = [
    "ConsoleSession",
    "Direction",
    "parse_direction",
    "render_board",
    "render_living",
]
