"""
引擎配置数据结构

定义各种配置类和默认参数。
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """走法引擎配置"""
    board_size: int = 8                 # 棋盘边长
    strict_destination: bool = False    # 终点越界时抛出异常，否则返回False
    enable_king_rule: bool = True       # 是否启用王的走法规则


@dataclass
class LoggingConfig:
    """日志配置"""
    level: str = 'INFO'                 # 日志级别
    log_file: Optional[str] = None      # 日志文件，None表示不写文件
    log_dir: str = 'logs/chessboard'    # 日志目录
    max_size: int = 10                  # 日志文件最大大小(MB)
    backup_count: int = 5               # 日志备份数量
    console_output: bool = True         # 是否输出到控制台


# 默认配置实例
DEFAULT_ENGINE_CONFIG = EngineConfig()
DEFAULT_LOGGING_CONFIG = LoggingConfig()
