"""
工具模块

包含日志、异常处理等通用工具。
"""

from .logger import setup_logger, get_logger, LoggerMixin
from .exceptions import (
    ChessRulesError, OutOfRangeError, UnsupportedPieceKindError, ConfigurationError
)

__all__ = [
    'setup_logger', 'get_logger', 'LoggerMixin',
    'ChessRulesError', 'OutOfRangeError', 'UnsupportedPieceKindError', 'ConfigurationError'
]
