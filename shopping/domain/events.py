"""
商店领域模型中的事件。
定义商店在库存和价格变化时发出的领域事件。
"""
from typing import Any, Dict, Type

from core.domain import DomainEvent, ValidationException


class StoreEventType:
    """商店事件类型枚举"""
    PURCHASE = "purchase"            # 商品被购买
    OUT_OF_STOCK = "out_of_stock"    # 商品售罄
    BACK_IN_STOCK = "back_in_stock"  # 售罄商品重新补货
    SALE_START = "sale_start"        # 开始促销
    SALE_END = "sale_end"            # 结束促销

    ALL = (PURCHASE, OUT_OF_STOCK, BACK_IN_STOCK, SALE_START, SALE_END)


class StoreEvent(DomainEvent):
    """
    商店事件基类。
    每个事件只携带涉及的商品和商店，事件种类本身就是语义。
    事件创建后不可修改，商店在分发后不保留事件。
    """

    def __init__(self, product: Any, store: Any):
        """
        初始化商店事件。

        Args:
            product: 涉及的商品
            store: 发出事件的商店

        Raises:
            ValidationException: 商品或商店为空时抛出
        """
        if product is None:
            raise ValidationException("product", "事件的商品不能为空")
        if store is None:
            raise ValidationException("store", "事件的商店不能为空")
        self._product = product
        self._store = store

    @property
    def product(self) -> Any:
        """获取涉及的商品"""
        return self._product

    @property
    def store(self) -> Any:
        """获取发出事件的商店"""
        return self._store

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(product={self._product!r}, store={self._store!r})"


class PurchaseEvent(StoreEvent):
    """商品购买事件"""
    event_type = StoreEventType.PURCHASE


class OutOfStockEvent(StoreEvent):
    """商品售罄事件"""
    event_type = StoreEventType.OUT_OF_STOCK


class BackInStockEvent(StoreEvent):
    """商品补货事件，仅在补货前库存为0时发出"""
    event_type = StoreEventType.BACK_IN_STOCK


class SaleStartEvent(StoreEvent):
    """促销开始事件"""
    event_type = StoreEventType.SALE_START


class SaleEndEvent(StoreEvent):
    """促销结束事件"""
    event_type = StoreEventType.SALE_END


# 事件类型到事件类的映射
STORE_EVENT_TYPES: Dict[str, Type[StoreEvent]] = {
    event_class.event_type: event_class
    for event_class in (
        PurchaseEvent,
        OutOfStockEvent,
        BackInStockEvent,
        SaleStartEvent,
        SaleEndEvent,
    )
}
