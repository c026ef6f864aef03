"""
商店领域模型包。
提供商品实体、收据值对象、商店聚合根、商店事件和观察者等。
"""

# 实体
from shopping.domain.entities import Product

# 值对象
from shopping.domain.value_objects import ReceiptItem

# 聚合根
from shopping.domain.aggregates import Store

# 领域事件
from shopping.domain.events import (
    StoreEventType,
    StoreEvent,
    PurchaseEvent,
    OutOfStockEvent,
    BackInStockEvent,
    SaleStartEvent,
    SaleEndEvent,
    STORE_EVENT_TYPES,
)

# 观察者
from shopping.domain.observers import (
    StoreObserver,
    StoreEventHandler,
    CallbackObserver,
    EventTypeObserver,
)

# 领域异常
from shopping.domain.exceptions import ProductNotFoundException, OutOfStockException

__all__ = [
    # 实体
    'Product',

    # 值对象
    'ReceiptItem',

    # 聚合根
    'Store',

    # 领域事件
    'StoreEventType',
    'StoreEvent',
    'PurchaseEvent',
    'OutOfStockEvent',
    'BackInStockEvent',
    'SaleStartEvent',
    'SaleEndEvent',
    'STORE_EVENT_TYPES',

    # 观察者
    'StoreObserver',
    'StoreEventHandler',
    'CallbackObserver',
    'EventTypeObserver',

    # 领域异常
    'ProductNotFoundException',
    'OutOfStockException',
]
