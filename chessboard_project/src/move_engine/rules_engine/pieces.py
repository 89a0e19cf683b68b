"""
棋子与坐标数据结构

定义棋子类型、阵营、棋子标识和棋盘坐标。
棋盘上每个格子存放一个带符号整数：绝对值为棋子类型，正数为白方，负数为黑方，0为空格。
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from numbers import Integral
from typing import NamedTuple, Tuple, Union


NOTHING = 0  # 空格


class PieceKind(IntEnum):
    """棋子类型（与阵营无关）"""
    PAWN = 1
    BISHOP = 2
    ROOK = 3
    KNIGHT = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def coerce(cls, value: Union['PieceKind', int, str]) -> 'PieceKind':
        """
        将各种表示转换为棋子类型

        Args:
            value: PieceKind、带符号的棋子标识或棋子名称（如 "rook"）

        Returns:
            PieceKind: 棋子类型

        Raises:
            ValueError: 无法识别的棋子类型
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            if len(name) == 1 and name in KIND_SYMBOLS:
                return KIND_SYMBOLS[name]
            raise ValueError(f"无效的棋子名称: {value}")
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValueError(f"无效的棋子类型: {value!r}")
        return cls(abs(int(value)))


class Side(Enum):
    """阵营"""
    WHITE = 1
    BLACK = -1


# 棋子符号 (白方大写，黑方小写)
SYMBOLS = {
    PieceKind.KING: 'K', PieceKind.QUEEN: 'Q', PieceKind.ROOK: 'R',
    PieceKind.BISHOP: 'B', PieceKind.KNIGHT: 'N', PieceKind.PAWN: 'P'
}
KIND_SYMBOLS = {v: k for k, v in SYMBOLS.items()}


class Point(NamedTuple):
    """棋盘坐标 (行, 列)"""
    row: int
    col: int


PointLike = Union[Point, Tuple[int, int]]


@dataclass(frozen=True)
class Piece:
    """
    棋子

    由棋子类型和阵营组成，可与带符号的整数标识互相转换。
    """
    kind: PieceKind
    side: Side = Side.WHITE

    @property
    def identifier(self) -> int:
        """带符号的棋子标识"""
        return int(self.kind) * self.side.value

    @property
    def symbol(self) -> str:
        """单字母符号"""
        letter = SYMBOLS[self.kind]
        return letter if self.side is Side.WHITE else letter.lower()

    @classmethod
    def from_identifier(cls, identifier: int) -> 'Piece':
        """
        从带符号的棋子标识创建棋子

        Args:
            identifier: 非零的棋子标识

        Returns:
            Piece: 棋子对象
        """
        identifier = int(identifier)
        if identifier == NOTHING:
            raise ValueError("空格没有对应的棋子")
        side = Side.WHITE if identifier > 0 else Side.BLACK
        return cls(PieceKind(abs(identifier)), side)

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Piece':
        """从单字母符号创建棋子，如 'R' 为白车，'n' 为黑马"""
        if len(symbol) != 1 or symbol.upper() not in KIND_SYMBOLS:
            raise ValueError(f"无效的棋子符号: {symbol}")
        side = Side.WHITE if symbol.isupper() else Side.BLACK
        return cls(KIND_SYMBOLS[symbol.upper()], side)

    def __str__(self) -> str:
        return self.symbol


def is_valid_identifier(identifier: int) -> bool:
    """检查整数是否为合法的棋子标识（含空格）"""
    return abs(int(identifier)) <= max(PieceKind)
