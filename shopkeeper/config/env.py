"""
环境变量处理模块。
负责加载和处理环境变量。
"""
import os
import warnings
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv


# 项目根目录
BASE_DIR = Path(__file__).resolve().parent.parent.parent


def load_env_file(env_path: Optional[str] = None) -> bool:
    """
    从当前文件同级目录加载.env文件。
    已存在的环境变量不会被覆盖。

    Args:
        env_path: .env文件路径，不提供则使用本目录下的.env

    Returns:
        加载成功返回True，文件不存在或加载失败返回False
    """
    env_path = env_path or os.path.join(os.path.dirname(__file__), '.env')

    if not os.path.exists(env_path):
        return False
    return load_dotenv(dotenv_path=env_path, encoding='utf-8')


# 尝试加载环境变量
load_env_file()


def get_env(name: str, default: Any = None, cast_type: Optional[type] = None) -> Any:
    """
    获取环境变量值，支持类型转换和默认值

    Args:
        name: 环境变量名称
        default: 默认值，如果环境变量不存在则返回此值
        cast_type: 类型转换函数，如int, float, bool等

    Returns:
        环境变量的值，经过类型转换（如果指定了cast_type）
    """
    value = os.environ.get(name, default)

    if value is None:
        return None

    if cast_type is not None:
        if cast_type is bool and isinstance(value, str):
            return value.lower() in ('true', 'yes', '1', 'y')
        if cast_type is list and isinstance(value, str):
            return [item.strip() for item in value.split(',') if item.strip()]
        try:
            return cast_type(value)
        except (ValueError, TypeError):
            warnings.warn(f"无法将环境变量{name}的值'{value}'转换为{cast_type.__name__}类型，使用默认值")
            return default

    return value


# 运行环境
SHOP_ENV = get_env('SHOP_ENV', default='development')

# 日志配置
LOG_LEVEL = get_env('LOG_LEVEL', default='INFO')
LOG_FILE = get_env('LOG_FILE', default='')
LOG_ROTATION = get_env('LOG_ROTATION', default='10 MB')
LOG_RETENTION = get_env('LOG_RETENTION', default='7 days')
LOG_SERIALIZE = get_env('LOG_SERIALIZE', default=False, cast_type=bool)
