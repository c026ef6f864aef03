"""
日志配置模块。
基于loguru配置控制台和文件日志输出，默认值取自shopkeeper.settings。
"""
import os
import sys
from typing import List, Optional

from loguru import logger

from shopkeeper import settings

# 控制台日志格式
CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# 文件日志格式
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {process} | {thread} | {name}:{function}:{line} - {message}"


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    serialize: Optional[bool] = None,
) -> List[int]:
    """
    配置日志输出。
    移除loguru默认的处理器，添加控制台处理器，并在配置了日志文件时添加按大小轮转的文件处理器。

    Args:
        level: 日志级别，不提供则使用settings.LOG_LEVEL
        log_file: 日志文件路径，不提供则使用settings.LOG_FILE，为空表示不写文件
        serialize: 是否以JSON格式输出，不提供则使用settings.LOG_SERIALIZE

    Returns:
        新添加的处理器ID列表
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_file = settings.LOG_FILE if log_file is None else log_file
    serialize = settings.LOG_SERIALIZE if serialize is None else serialize

    logger.remove()
    handler_ids = [
        logger.add(
            sys.stderr,
            level=level,
            format=CONSOLE_FORMAT,
            serialize=serialize,
            backtrace=settings.DEBUG,
            diagnose=settings.DEBUG,
        )
    ]

    if log_file:
        # 确保日志目录存在
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_file,
                level=level,
                format=FILE_FORMAT,
                serialize=serialize,
                rotation=settings.LOG_ROTATION,
                retention=settings.LOG_RETENTION,
                encoding='utf-8',
            )
        )

    logger.debug(f"日志配置完成: 环境={settings.SHOP_ENV}, 级别={level}, 文件={log_file or '无'}")
    return handler_ids
