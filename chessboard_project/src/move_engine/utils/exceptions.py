"""
异常定义

定义走法引擎的各种异常类型。
"""

from typing import Any, Optional, Tuple


class ChessRulesError(Exception):
    """
    走法引擎基础异常

    所有走法引擎相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class OutOfRangeError(ChessRulesError):
    """
    坐标越界异常

    当走法查询的坐标不在棋盘范围内时抛出。
    """

    def __init__(self, point: Tuple[int, int], board_size: int, role: str = "起点"):
        message = f"{role}坐标越界: {tuple(point)}，棋盘大小 {board_size}x{board_size}"
        super().__init__(message, "OUT_OF_RANGE")
        self.point = tuple(point)
        self.board_size = board_size
        self.role = role


class UnsupportedPieceKindError(ChessRulesError):
    """
    不支持的棋子类型异常

    当请求的棋子类型没有对应的走法规则时抛出。
    """

    def __init__(self, piece_kind: Any, reason: str = ""):
        message = f"不支持的棋子类型: {piece_kind}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "UNSUPPORTED_PIECE")
        self.piece_kind = piece_kind
        self.reason = reason


class ConfigurationError(ChessRulesError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: Optional[str] = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason
