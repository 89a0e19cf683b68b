"""
棋盘走法引擎

在 N×N 棋盘上判断马、车、象、后（以及王）的走法是否几何可达，
包括规则引擎、棋盘渲染、配置管理和日志工具。
"""

__version__ = "0.1.0"
__author__ = "Chessboard Team"

from .rules_engine import (
    NOTHING, PieceKind, Side, Piece, Point,
    ChessBoard, Board, MoveValidator, glyph, render_board
)
from .config import ConfigManager, EngineConfig, LoggingConfig
from .utils import (
    setup_logger, get_logger,
    ChessRulesError, OutOfRangeError, UnsupportedPieceKindError, ConfigurationError
)

__all__ = [
    "__version__", "__author__",
    "NOTHING", "PieceKind", "Side", "Piece", "Point",
    "ChessBoard", "Board", "MoveValidator", "glyph", "render_board",
    "ConfigManager", "EngineConfig", "LoggingConfig",
    "setup_logger", "get_logger",
    "ChessRulesError", "OutOfRangeError", "UnsupportedPieceKindError", "ConfigurationError"
]
