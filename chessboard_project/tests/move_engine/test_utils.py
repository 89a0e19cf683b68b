"""
工具模块测试

测试异常类型和日志工具。
"""

import logging

import pytest
from chessboard_project.src.move_engine.utils import (
    ChessRulesError, ConfigurationError, LoggerMixin, OutOfRangeError,
    UnsupportedPieceKindError, get_logger, setup_logger
)


class TestExceptions:
    """异常类型测试"""

    def test_base_error(self):
        error = ChessRulesError("出错了")
        assert error.error_code == "ChessRulesError"
        assert str(error) == "[ChessRulesError] 出错了"

    def test_out_of_range(self):
        error = OutOfRangeError((8, 0), 8)
        assert error.error_code == "OUT_OF_RANGE"
        assert error.point == (8, 0)
        assert error.board_size == 8
        assert "(8, 0)" in str(error)
        assert isinstance(error, ChessRulesError)

    def test_unsupported_piece(self):
        error = UnsupportedPieceKindError("PAWN", "未定义走法规则")
        assert error.error_code == "UNSUPPORTED_PIECE"
        assert "PAWN" in str(error)
        assert "未定义走法规则" in str(error)

    def test_configuration_error(self):
        error = ConfigurationError("engine", "未知的配置名称")
        assert error.error_code == "CONFIG_ERROR"
        with pytest.raises(ChessRulesError):
            raise error


class TestLogger:
    """日志工具测试"""

    @pytest.fixture(autouse=True)
    def clean_logger(self):
        yield
        for name in ("chessboard.test_file", "chessboard.test_console"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_setup_logger_with_file(self, tmp_path):
        logger = setup_logger(
            name="chessboard.test_file",
            level="debug",
            log_file="engine.log",
            log_dir=str(tmp_path / "logs"),
            console_output=False
        )
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        logger.info("写入日志")
        for handler in logger.handlers:
            handler.flush()
        assert "写入日志" in (tmp_path / "logs" / "engine.log").read_text(encoding="utf-8")

    def test_setup_logger_is_idempotent(self):
        first = setup_logger(name="chessboard.test_console", level="WARNING")
        second = setup_logger(name="chessboard.test_console", level="DEBUG")
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger(name="chessboard.test_console", level="LOUD", console_output=False)
        assert logger.level == logging.INFO

    def test_get_logger(self):
        assert get_logger("chessboard.x") is logging.getLogger("chessboard.x")

    def test_logger_mixin(self, caplog):
        class Sample(LoggerMixin):
            pass

        sample = Sample()
        assert sample.logger.name == "chessboard.Sample"

        with caplog.at_level(logging.WARNING, logger="chessboard.Sample"):
            sample.log_warning("注意")
        assert "注意" in caplog.text
