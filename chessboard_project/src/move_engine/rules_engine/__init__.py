"""
走法规则引擎模块

包含棋盘表示、棋子定义、走法可达性判断和棋盘渲染。
"""

from .pieces import NOTHING, PieceKind, Side, Piece, Point
from .chess_board import ChessBoard, Board
from .move_validator import MoveValidator
from .board_renderer import glyph, render_board

__all__ = [
    'NOTHING', 'PieceKind', 'Side', 'Piece', 'Point',
    'ChessBoard', 'Board', 'MoveValidator',
    'glyph', 'render_board'
]
