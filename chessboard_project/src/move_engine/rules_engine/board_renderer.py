"""
棋盘文本渲染

将棋子标识转换为棋子符号，并把棋盘输出为可读的字符串。
"""

from typing import Optional

from .pieces import NOTHING, Piece, PieceKind, Side


# 棋子图形符号
GLYPHS = {
    (PieceKind.KING, Side.WHITE): "♔",
    (PieceKind.QUEEN, Side.WHITE): "♕",
    (PieceKind.ROOK, Side.WHITE): "♖",
    (PieceKind.BISHOP, Side.WHITE): "♗",
    (PieceKind.KNIGHT, Side.WHITE): "♘",
    (PieceKind.PAWN, Side.WHITE): "♙",
    (PieceKind.KING, Side.BLACK): "♚",
    (PieceKind.QUEEN, Side.BLACK): "♛",
    (PieceKind.ROOK, Side.BLACK): "♜",
    (PieceKind.BISHOP, Side.BLACK): "♝",
    (PieceKind.KNIGHT, Side.BLACK): "♞",
    (PieceKind.PAWN, Side.BLACK): "♟",
}

# 空格占位符，按 (行 + 列) 的奇偶交替
LIGHT_SQUARE = "□"
DARK_SQUARE = "■"


def glyph(identifier: int) -> Optional[str]:
    """
    获取棋子标识对应的图形符号

    Args:
        identifier: 带符号的棋子标识

    Returns:
        Optional[str]: 图形符号，空格返回None
    """
    if identifier == NOTHING:
        return None
    piece = Piece.from_identifier(identifier)
    return GLYPHS[(piece.kind, piece.side)]


def empty_square(row: int, col: int) -> str:
    return LIGHT_SQUARE if (row + col) % 2 == 0 else DARK_SQUARE


def render_board(board, with_coordinates: bool = False) -> str:
    """
    转换为可视化字符串

    Args:
        board: 棋盘对象，需提供 size 和 get(row, col)
        with_coordinates: 是否输出行列编号

    Returns:
        str: 每行一条的棋盘字符串
    """
    lines = []
    if with_coordinates:
        lines.append("  " + "".join(str(col % 10) for col in range(board.size)))

    for row in range(board.size):
        cells = []
        for col in range(board.size):
            symbol = glyph(board.get(row, col))
            cells.append(symbol if symbol is not None else empty_square(row, col))
        line = "".join(cells)
        if with_coordinates:
            line = f"{row % 10} {line}"
        lines.append(line)

    return "\n".join(lines)
