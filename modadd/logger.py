"""
日志模块

根据 ModAddConfig 中的日志设置配置 loguru：控制台输出，以及可选的轮转日志文件。
"""

import os
import sys
from typing import Optional

from loguru import logger

from modadd.exceptions import ConfigError

ENV_DEBUG = "MODADD_DEBUG"

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} | {message}"


def resolve_level(level: Optional[str]) -> str:
    """
    确定日志级别

    显式给出的级别优先；否则 MODADD_DEBUG=1 时为 DEBUG，默认 INFO。

    Raises:
        ConfigError: loguru 不认识该级别
    """
    if level is None:
        return "DEBUG" if os.environ.get(ENV_DEBUG, "0") == "1" else "INFO"
    level = level.upper()
    try:
        logger.level(level)
    except ValueError as e:
        raise ConfigError(f"未知的日志级别: {level}") from e
    return level


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    sink=sys.stdout,
    enqueue: bool = True,
    colorize: bool = True,
) -> str:
    """
    设置日志记录器

    Args:
        level: 日志级别，None 时由环境变量决定
        log_file: 额外写入的日志文件，按 10 MB 轮转
        sink: 控制台输出目标
        enqueue: 是否启用队列（线程安全）
        colorize: 控制台是否启用颜色

    Returns:
        实际使用的日志级别
    """
    level = resolve_level(level)
    debug = level in ("TRACE", "DEBUG")

    logger.remove()
    logger.add(
        sink=sink,
        format=CONSOLE_FORMAT,
        enqueue=enqueue,
        level=level,
        colorize=colorize,
        backtrace=debug,
        diagnose=debug,
    )
    if log_file:
        logger.add(
            log_file,
            format=FILE_FORMAT,
            enqueue=enqueue,
            level=level,
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
        )

    if log_file:
        logger.debug(f"日志级别: {level}, 日志文件: {log_file}")
    else:
        logger.debug(f"日志级别: {level}")
    return level


__all__ = ["logger", "resolve_level", "setup_logger"]
