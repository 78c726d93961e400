"""日志配置（仅供 CLI / 界面入口调用，核心模块不配置 handler）"""
import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def setup_logging(level: str = "WARNING", json_format: bool = False) -> None:
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # 移除已有 handler
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        formatter = JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
