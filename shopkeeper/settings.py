"""
shopkeeper项目配置入口。

此文件根据环境变量SHOP_ENV（可写在.env文件中）加载相应的配置模块。
"""
from .config.env import SHOP_ENV

# 根据环境加载相应的配置
if SHOP_ENV == 'production':
    from .config.production import *
elif SHOP_ENV == 'testing':
    from .config.testing import *
else:  # 默认使用开发环境配置
    from .config.development import *
