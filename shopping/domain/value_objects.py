"""
商店领域模型中的值对象。
包含收据条目等不可变记录。
"""
from core.domain import ValueObject


class ReceiptItem(ValueObject):
    """
    收据条目值对象。
    记录一次完成的购买：商品名称、实付价格（折后，精确到分）和商店名称。
    与商店没有引用关系，是独立的快照。
    """

    def __init__(self, product_name: str, price: float, store_name: str):
        """
        初始化收据条目。

        Args:
            product_name: 商品名称
            price: 实付价格
            store_name: 商店名称
        """
        self._product_name = product_name
        self._price = price
        self._store_name = store_name
        self._freeze()

    @property
    def product_name(self) -> str:
        """获取商品名称"""
        return self._product_name

    @property
    def price(self) -> float:
        """获取实付价格"""
        return self._price

    @property
    def store_name(self) -> str:
        """获取商店名称"""
        return self._store_name
