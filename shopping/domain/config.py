"""
商店模块配置文件。
从项目设置中获取商店模块的配置。
"""
import decimal
from decimal import Decimal

from shopkeeper import settings

# 获取商店模块配置，如果不存在则使用默认值
STORE_SETTINGS = getattr(settings, 'STORE_SETTINGS', {})

# 售价精确到分
PRICE_QUANTUM = Decimal(STORE_SETTINGS.get('PRICE_QUANTUM', '0.01'))

# 售价舍入方式，固定为四舍五入（ROUND_HALF_UP）
PRICE_ROUNDING = getattr(decimal, STORE_SETTINGS.get('PRICE_ROUNDING', 'ROUND_HALF_UP'))

# 折扣取值范围
DISCOUNT_MIN = 0.0
DISCOUNT_MAX = 1.0
