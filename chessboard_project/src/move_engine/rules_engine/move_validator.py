"""
走法规则引擎

按棋子类型判断走法的几何可达性：马的跳跃、车和象的直线射线（检查阻挡）、后为两者之并。
不考虑轮次、将军和特殊走法，也不检查终点是否为己方棋子。
"""

from typing import Any, Callable, Dict, List, Optional

from .chess_board import ChessBoard
from .pieces import NOTHING, PieceKind, Point, PointLike
from ..utils.exceptions import OutOfRangeError, UnsupportedPieceKindError
from ..utils.logger import LoggerMixin


class MoveValidator(LoggerMixin):
    """
    走法规则引擎

    无状态：结果只取决于调用时的棋盘、棋子类型、起点和终点，且不修改棋盘。
    """

    def __init__(self, strict_destination: bool = False, enable_king_rule: bool = True):
        """
        初始化规则引擎

        Args:
            strict_destination: 终点越界时是否抛出异常（否则返回False）
            enable_king_rule: 是否启用王的走法规则
        """
        self.strict_destination = strict_destination
        self.enable_king_rule = enable_king_rule

        # 马：日字
        self.knight_offsets = {(1, 2), (2, 1)}

        self._rules: Dict[PieceKind, Callable[[ChessBoard, Point, Point], bool]] = {
            PieceKind.KNIGHT: self._knight_available,
            PieceKind.ROOK: self._rook_available,
            PieceKind.BISHOP: self._bishop_available,
            PieceKind.QUEEN: self._queen_available,
        }
        if enable_king_rule:
            self._rules[PieceKind.KING] = self._king_available

    @classmethod
    def from_config(cls, config) -> 'MoveValidator':
        """
        从引擎配置创建规则引擎

        Args:
            config: EngineConfig 配置对象

        Returns:
            MoveValidator: 规则引擎
        """
        return cls(
            strict_destination=config.strict_destination,
            enable_king_rule=config.enable_king_rule
        )

    def supported_kinds(self) -> List[PieceKind]:
        """已定义走法规则的棋子类型"""
        return sorted(self._rules)

    def move_available(self, board: ChessBoard, piece_kind: Any,
                       from_pos: PointLike, to_pos: PointLike) -> bool:
        """
        判断指定类型的棋子能否从起点走到终点

        Args:
            board: 当前棋盘
            piece_kind: 棋子类型（PieceKind、带符号的棋子标识或名称），阵营不影响结果
            from_pos: 起点 (行, 列)，必须在棋盘内
            to_pos: 终点 (行, 列)

        Returns:
            bool: 是否可达

        Raises:
            OutOfRangeError: 起点越界；strict_destination 为True时终点越界
            UnsupportedPieceKindError: 棋子类型没有对应的走法规则
        """
        from_pos = Point(*from_pos)
        to_pos = Point(*to_pos)

        if not board.is_point_inside(from_pos):
            self.log_warning(f"起点越界: {tuple(from_pos)}, 棋盘大小 {board.size}")
            raise OutOfRangeError(from_pos, board.size)

        rule = self._get_rule(piece_kind)

        if not board.is_point_inside(to_pos):
            if self.strict_destination:
                self.log_warning(f"终点越界: {tuple(to_pos)}, 棋盘大小 {board.size}")
                raise OutOfRangeError(to_pos, board.size, role="终点")
            return False

        result = rule(board, from_pos, to_pos)
        self.log_debug(f"{piece_kind} {tuple(from_pos)} -> {tuple(to_pos)}: {result}")
        return result

    def can_piece_move(self, board: ChessBoard, from_pos: PointLike, to_pos: PointLike) -> bool:
        """
        判断起点上的棋子能否走到终点

        Args:
            board: 当前棋盘
            from_pos: 起点
            to_pos: 终点

        Returns:
            bool: 是否可达，起点为空格时返回False
        """
        from_pos = Point(*from_pos)
        if not board.is_point_inside(from_pos):
            raise OutOfRangeError(from_pos, board.size)

        identifier = board[from_pos]
        if identifier == NOTHING:
            return False
        return self.move_available(board, identifier, from_pos, to_pos)

    def reachable_squares(self, board: ChessBoard, piece_kind: Any,
                          from_pos: PointLike) -> List[Point]:
        """
        生成指定类型棋子从起点出发的所有可达格子

        Args:
            board: 当前棋盘
            piece_kind: 棋子类型
            from_pos: 起点

        Returns:
            List[Point]: 按行优先排列的可达格子（不含起点本身）
        """
        from_pos = Point(*from_pos)
        return [
            point for point in board.iter_points()
            if point != from_pos and self.move_available(board, piece_kind, from_pos, point)
        ]

    def _get_rule(self, piece_kind: Any) -> Callable[[ChessBoard, Point, Point], bool]:
        """根据棋子类型获取走法规则"""
        try:
            kind = PieceKind.coerce(piece_kind)
        except ValueError as e:
            raise UnsupportedPieceKindError(piece_kind, str(e)) from e

        rule: Optional[Callable] = self._rules.get(kind)
        if rule is None:
            raise UnsupportedPieceKindError(kind.name, "未定义走法规则")
        return rule

    # ==================== 各棋子规则 ====================

    def _knight_available(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        """马：行列差为 (1, 2) 或 (2, 1)，不检查阻挡"""
        delta = (abs(from_pos.row - to_pos.row), abs(from_pos.col - to_pos.col))
        return delta in self.knight_offsets

    def _rook_available(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        return (self._is_vertical_reachable(board, from_pos, to_pos) or
                self._is_horizontal_reachable(board, from_pos, to_pos))

    def _bishop_available(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        return (self._is_anti_diagonal_reachable(board, from_pos, to_pos) or
                self._is_diagonal_reachable(board, from_pos, to_pos))

    def _queen_available(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        return (self._rook_available(board, from_pos, to_pos) or
                self._bishop_available(board, from_pos, to_pos))

    def _king_available(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        """王：向任意方向走一步"""
        return max(abs(from_pos.row - to_pos.row), abs(from_pos.col - to_pos.col)) == 1

    # ==================== 射线扫描 ====================
    # 只检查起点和终点之间的格子，两端本身不检查

    def _is_vertical_reachable(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        """同一列"""
        if to_pos.col != from_pos.col:
            return False

        step = 1 if to_pos.row > from_pos.row else -1
        for row in range(from_pos.row + step, to_pos.row, step):
            if board.get(row, to_pos.col) != NOTHING:
                return False
        return True

    def _is_horizontal_reachable(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        """同一行"""
        if to_pos.row != from_pos.row:
            return False

        step = 1 if to_pos.col > from_pos.col else -1
        for col in range(from_pos.col + step, to_pos.col, step):
            if board.get(to_pos.row, col) != NOTHING:
                return False
        return True

    def _is_diagonal_reachable(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        """主对角线方向 (行 - 列 不变)"""
        if from_pos.row - from_pos.col != to_pos.row - to_pos.col:
            return False

        step = 1 if to_pos.col > from_pos.col else -1
        for col in range(from_pos.col + step, to_pos.col, step):
            if board.get(from_pos.row + col - from_pos.col, col) != NOTHING:
                return False
        return True

    def _is_anti_diagonal_reachable(self, board: ChessBoard, from_pos: Point, to_pos: Point) -> bool:
        """副对角线方向 (行 + 列 不变)"""
        if from_pos.row + from_pos.col != to_pos.row + to_pos.col:
            return False

        step = 1 if to_pos.col > from_pos.col else -1
        for col in range(from_pos.col + step, to_pos.col, step):
            if board.get(from_pos.row + from_pos.col - col, col) != NOTHING:
                return False
        return True
