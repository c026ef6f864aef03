"""
商店领域异常。
"""
from typing import Any

from core.domain import EntityNotFoundException, InsufficientStockException


class ProductNotFoundException(EntityNotFoundException):
    """商品不在该商店的目录中"""

    def __init__(self, product_id: Any):
        super().__init__("商品", product_id)
        self.product_id = product_id


class OutOfStockException(InsufficientStockException):
    """商品已售罄，无法购买"""

    def __init__(self, product_id: Any):
        super().__init__(product_id, requested=1, available=0)
