"""
棋盘走法系统 (Chessboard Project)

在 N×N 棋盘上判断棋子走法几何可达性的规则引擎和命令行工具。
"""

__version__ = "0.1.0"
__author__ = "Chessboard Team"
__description__ = "棋盘走法系统 - 马、车、象、后的走法可达性判断"

from chessboard_project.src import move_engine

__all__ = [
    "move_engine",
    "__version__",
    "__author__",
    "__description__",
]
