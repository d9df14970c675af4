"""
logging_config - 日志配置

演示驱动使用：将 tension_spline 命名空间的日志输出到标准输出。
"""

import logging
import sys

LOGGER_NAME = "tension_spline"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    为 tension_spline logger 安装唯一的标准输出 handler。

    Args:
        level: 日志级别 (logging.DEBUG, logging.INFO, ...)

    Returns:
        配置后的 logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
