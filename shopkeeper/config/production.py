"""
生产环境配置文件。
包含生产环境特定的配置。
"""
from .env import *

# 生产环境禁用调试模式
DEBUG = False

# 生产环境默认写入日志文件并以JSON格式输出
LOG_LEVEL = get_env('LOG_LEVEL', default='INFO')
LOG_FILE = get_env('LOG_FILE', default=str(BASE_DIR / 'logs' / 'shopkeeper.log'))
LOG_SERIALIZE = get_env('LOG_SERIALIZE', default=True, cast_type=bool)

# 商店模块生产环境配置
STORE_SETTINGS = {
    'PRICE_QUANTUM': '0.01',
    'PRICE_ROUNDING': 'ROUND_HALF_UP',
}
