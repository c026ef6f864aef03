"""
开发环境配置文件。
包含开发环境特定的配置。
"""
from .env import *

# 开发环境默认开启调试模式
DEBUG = True

# 日志配置 - 开发环境更详细的日志
LOG_LEVEL = get_env('LOG_LEVEL', default='DEBUG')

# 商店模块开发环境配置
STORE_SETTINGS = {
    'PRICE_QUANTUM': '0.01',
    'PRICE_ROUNDING': 'ROUND_HALF_UP',
}
