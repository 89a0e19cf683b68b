"""
Chessboard 源代码模块

包含一个子系统：
- move_engine: 棋盘走法引擎
"""

from . import move_engine

__all__ = [
    "move_engine",
]
