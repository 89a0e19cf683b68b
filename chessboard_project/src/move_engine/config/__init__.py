"""
配置管理模块

包含引擎配置和日志配置。
"""

from .config_manager import ConfigManager
from .engine_config import EngineConfig, LoggingConfig

__all__ = ['ConfigManager', 'EngineConfig', 'LoggingConfig']
