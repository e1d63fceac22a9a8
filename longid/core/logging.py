"""
日志管理模块

使用loguru库实现统一的日志管理，支持配置日志级别、格式、输出位置等。
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from longid.core.config import LogConfig


class InterceptHandler(logging.Handler):
    """
    拦截标准库logging的日志，转发给loguru处理
    """

    def emit(self, record: logging.LogRecord) -> None:
        # 获取对应的loguru级别
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # 找到调用发起的位置
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(
    config: LogConfig,
    app_name: str = "longid",
) -> None:
    """
    设置日志系统

    Args:
        config: 日志配置
        app_name: 应用名称，用于日志文件命名
    """
    # 清除所有已存在的处理器
    logger.remove()

    # 将标准库的日志器与loguru集成
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    logger.configure(
        handlers=[
            {
                "sink": sys.stderr,
                "level": config.level.value,
                "format": config.format,
            }
        ]
    )

    # 如果配置了文件输出，则添加文件输出
    if config.file_path:
        log_file_path = Path(config.file_path)
        if log_file_path.is_dir() or not log_file_path.suffix:
            log_file_path = log_file_path / f"{app_name}.log"

        # 确保日志目录存在
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file_path,
            level=config.level.value,
            format=config.format,
            rotation=config.rotation,
            retention=config.retention,
            compression=config.compression,
            serialize=config.serialize,
        )

    logger.debug(f"日志系统已初始化，级别: {config.level.value}")


def get_logger(name: str = "longid"):
    """
    获取指定名称的日志记录器

    Args:
        name: 日志记录器名称

    Returns:
        logger: loguru日志记录器
    """
    return logger.bind(name=name)
