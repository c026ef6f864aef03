"""
测试环境配置文件。
包含测试环境特定的配置。
"""
from .env import *

# 测试环境禁用调试模式
DEBUG = False

# 简化日志配置，测试中只关心错误，不写日志文件
LOG_LEVEL = get_env('LOG_LEVEL', default='ERROR')
LOG_FILE = ''

# 商店模块测试环境配置
STORE_SETTINGS = {
    'PRICE_QUANTUM': '0.01',
    'PRICE_ROUNDING': 'ROUND_HALF_UP',
}
