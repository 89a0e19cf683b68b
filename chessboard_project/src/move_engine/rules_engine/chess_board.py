"""
棋盘数据结构

定义 N×N 棋盘的表示、格子读写、边界查询和格式转换功能。
"""

import json
from numbers import Integral
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np

from .pieces import NOTHING, Piece, PieceKind, Point, PointLike, is_valid_identifier


PieceLike = Union[Piece, int]


class ChessBoard:
    """
    棋盘类

    持有一个 N×N 的棋子标识矩阵。棋盘大小在创建时确定，之后不再改变。
    """

    DEFAULT_SIZE = 8

    def __init__(self, size: int = DEFAULT_SIZE):
        """
        初始化空棋盘

        Args:
            size: 棋盘边长 N
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
            raise ValueError(f"无效的棋盘大小: {size}")

        self._size = int(size)
        # N×N 的棋盘矩阵 (行x列)，全部为空格
        self.board = np.zeros((self._size, self._size), dtype=int)

    @property
    def size(self) -> int:
        """棋盘边长"""
        return self._size

    @classmethod
    def from_matrix(cls, matrix: Union[np.ndarray, List[List[int]]]) -> 'ChessBoard':
        """
        从矩阵创建棋盘对象

        Args:
            matrix: N×N 的棋子标识矩阵

        Returns:
            ChessBoard: 棋盘对象
        """
        matrix = np.asarray(matrix)
        if matrix.size and matrix.dtype.kind not in "iu":
            raise ValueError(f"棋盘矩阵必须为整数类型，实际类型: {matrix.dtype}")
        matrix = matrix.astype(int)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"棋盘矩阵必须是方阵，实际形状: {matrix.shape}")
        if np.abs(matrix).max(initial=0) > max(PieceKind):
            raise ValueError("棋盘矩阵包含无效的棋子标识")

        board = cls(matrix.shape[0])
        board.board = matrix.copy()
        return board

    def to_matrix(self) -> np.ndarray:
        """
        转换为矩阵格式

        Returns:
            np.ndarray: N×N 的棋盘矩阵副本
        """
        return self.board.copy()

    # ==================== 格子读写 ====================

    def get(self, row: int, col: int) -> int:
        """
        读取格子上的棋子标识

        不做边界检查，调用方需保证坐标在棋盘内。
        """
        return int(self.board[row, col])

    def set(self, row: int, col: int, piece: PieceLike) -> None:
        """
        写入格子上的棋子标识

        Args:
            row: 行
            col: 列
            piece: 棋子对象或带符号的棋子标识
        """
        if isinstance(piece, Piece):
            identifier = piece.identifier
        elif isinstance(piece, Integral) and not isinstance(piece, bool):
            identifier = int(piece)
        else:
            raise ValueError(f"无效的棋子标识: {piece!r}")
        if not is_valid_identifier(identifier):
            raise ValueError(f"无效的棋子标识: {identifier}")
        self.board[row, col] = identifier

    def __getitem__(self, pos: PointLike) -> int:
        row, col = pos
        return self.get(row, col)

    def __setitem__(self, pos: PointLike, piece: PieceLike) -> None:
        row, col = pos
        self.set(row, col, piece)

    def get_piece_at(self, pos: PointLike) -> Optional[Piece]:
        """
        获取指定位置的棋子

        Args:
            pos: 位置坐标 (行, 列)

        Returns:
            Optional[Piece]: 棋子，空格或越界时返回None
        """
        if not self.is_point_inside(pos):
            return None
        identifier = self[pos]
        if identifier == NOTHING:
            return None
        return Piece.from_identifier(identifier)

    def place(self, pos: PointLike, piece: PieceLike) -> None:
        """在指定位置放置棋子"""
        self[pos] = piece

    def remove(self, pos: PointLike) -> None:
        """清空指定位置"""
        self[pos] = NOTHING

    def is_empty(self, pos: PointLike) -> bool:
        return self[pos] == NOTHING

    def clear(self) -> None:
        """清空整个棋盘"""
        self.board.fill(NOTHING)

    # ==================== 边界查询 ====================

    def is_in_range(self, x: int) -> bool:
        """检查单个坐标分量是否在 [0, N) 内"""
        return 0 <= x < self._size

    def is_point_inside(self, point: PointLike) -> bool:
        """检查坐标的行和列是否都在棋盘内"""
        row, col = point
        return self.is_in_range(row) and self.is_in_range(col)

    def iter_points(self):
        """按行优先顺序遍历所有坐标"""
        for row in range(self._size):
            for col in range(self._size):
                yield Point(row, col)

    def get_all_pieces(self) -> List[Tuple[Point, Piece]]:
        """
        获取棋盘上所有棋子

        Returns:
            List[Tuple[Point, Piece]]: (位置, 棋子) 列表
        """
        rows, cols = np.nonzero(self.board)
        return [
            (Point(int(r), int(c)), Piece.from_identifier(self.board[r, c]))
            for r, c in zip(rows, cols)
        ]

    # ==================== 走法查询 ====================

    def move_available(self, piece_kind: Any, from_pos: PointLike, to_pos: PointLike) -> bool:
        """
        检查指定类型的棋子能否从起点走到终点

        Args:
            piece_kind: 棋子类型
            from_pos: 起点
            to_pos: 终点

        Returns:
            bool: 是否可达
        """
        from .move_validator import MoveValidator
        return MoveValidator().move_available(self, piece_kind, from_pos, to_pos)

    # ==================== 序列化 ====================

    def to_dict(self) -> Dict[str, Any]:
        return {'size': self._size, 'board': self.board.tolist()}

    def to_json(self) -> str:
        """
        转换为JSON格式

        Returns:
            str: JSON格式字符串
        """
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> 'ChessBoard':
        """
        从JSON格式创建棋盘对象

        Args:
            json_str: JSON格式字符串

        Returns:
            ChessBoard: 棋盘对象
        """
        data = json.loads(json_str)
        if not isinstance(data, dict) or 'board' not in data:
            raise ValueError("JSON中缺少棋盘数据")
        board = cls.from_matrix(data['board'])
        if 'size' in data and data['size'] != board.size:
            raise ValueError(f"棋盘大小不一致: {data['size']} != {board.size}")
        return board

    def save_to_file(self, filepath: str) -> None:
        """保存棋盘到JSON文件"""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(self.to_json())

    @classmethod
    def load_from_file(cls, filepath: str) -> 'ChessBoard':
        """从JSON文件加载棋盘"""
        with open(filepath, 'r', encoding='utf-8') as f:
            return cls.from_json(f.read())

    def copy(self) -> 'ChessBoard':
        return ChessBoard.from_matrix(self.board)

    def __str__(self) -> str:
        from .board_renderer import render_board
        return render_board(self)

    def __repr__(self) -> str:
        return f"ChessBoard(size={self._size}, pieces={int(np.count_nonzero(self.board))})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChessBoard):
            return False
        return np.array_equal(self.board, other.board)

    def __hash__(self) -> int:
        return hash((self._size, self.board.tobytes()))


# 通用名称
Board = ChessBoard
