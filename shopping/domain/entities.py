"""
商店领域模型中的实体。
包含商品实体的定义。
"""
from core.domain import Entity, ValidationException


class Product(Entity):
    """
    商品实体。
    代表商店目录中的一件商品，只包含名称和基础价格。

    商品以标识区分：名称和价格都相同的两个商品是两个不同的目录条目。
    创建后不可修改。
    """

    def __init__(self, name: str, base_price: float):
        """
        初始化商品实体。
        商品ID总是自动生成，不能由调用方指定。

        Args:
            name: 商品名称，不能为空
            base_price: 商品基础价格，不能为0

        Raises:
            ValidationException: 名称为空或基础价格为0时抛出
        """
        if not name:
            raise ValidationException("name", "商品名称不能为空")
        if base_price is None or base_price == 0:
            raise ValidationException("base_price", "商品基础价格不能为0")

        super().__init__()
        self._name = name
        self._base_price = base_price

    @property
    def name(self) -> str:
        """获取商品名称"""
        return self._name

    @property
    def base_price(self) -> float:
        """获取商品基础价格"""
        return self._base_price

    def __repr__(self) -> str:
        return f"Product(id={self.id!s}, name={self._name!r}, base_price={self._base_price!r})"
