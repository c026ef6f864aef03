"""
商店领域模型中的聚合根。
包含商店聚合根的定义，管理商品目录、库存、折扣和观察者。
"""
from decimal import Decimal
from typing import Any, Dict, List

from loguru import logger

from core.domain import AggregateRoot, EventPublisher, ValidationException
from shopping.domain.config import DISCOUNT_MAX, DISCOUNT_MIN, PRICE_QUANTUM, PRICE_ROUNDING
from shopping.domain.entities import Product
from shopping.domain.events import (
    BackInStockEvent,
    OutOfStockEvent,
    PurchaseEvent,
    SaleEndEvent,
    SaleStartEvent,
    StoreEvent,
)
from shopping.domain.exceptions import OutOfStockException, ProductNotFoundException
from shopping.domain.observers import StoreObserver
from shopping.domain.value_objects import ReceiptItem


def _notify_observer(observer: StoreObserver, event: StoreEvent) -> None:
    observer.update(event)


def _is_count(value: Any) -> bool:
    # bool是int的子类，但不是有效的数量
    return isinstance(value, int) and not isinstance(value, bool)


def _round_price(value: Decimal) -> Decimal:
    """按配置的精度和舍入方式把价格精确到分"""
    return value.quantize(PRICE_QUANTUM, rounding=PRICE_ROUNDING)


class Store(AggregateRoot):
    """
    商店聚合根。
    拥有商品目录、库存表、折扣表和观察者列表，是商店事件的唯一发出者。

    库存表和折扣表的键集合始终相同：商品在两张表中都存在即表示该商店在售。
    所有修改操作都会在返回前按注册顺序同步通知全部观察者。

    注意：观察者在update中同步执行。购买和补货时事件先于库存变化发出，
    观察者此时看到的是变化前的库存。本类不做任何并发控制，
    多线程共享同一个商店时需要调用方自行加锁。
    """

    def __init__(self, name: str, id: Any = None):
        """
        初始化商店。

        Args:
            name: 商店名称
            id: 商店ID，如果未提供则自动生成

        Raises:
            ValidationException: 名称为空时抛出
        """
        if not name:
            raise ValidationException("name", "商店名称不能为空")
        super().__init__(id)
        self._name = name
        self._inventory: Dict[Product, int] = {}
        self._discount: Dict[Product, float] = {}
        self._observers = EventPublisher(invoke=_notify_observer)

    @property
    def name(self) -> str:
        """获取商店名称"""
        return self._name

    @property
    def observers(self) -> List[StoreObserver]:
        """获取观察者列表的副本"""
        return self._observers.handlers

    def __contains__(self, product: Any) -> bool:
        return product in self._inventory

    def __len__(self) -> int:
        return len(self._inventory)

    def __repr__(self) -> str:
        return f"Store(name={self._name!r}, products={len(self._inventory)})"

    # 观察者管理

    def add_observer(self, observer: StoreObserver) -> None:
        """
        注册观察者。允许重复注册同一个观察者。

        Args:
            observer: 观察者

        Raises:
            ValidationException: 观察者为空或没有update方法时抛出
        """
        if observer is None:
            raise ValidationException("observer", "观察者不能为空")
        if not callable(getattr(observer, "update", None)):
            raise ValidationException("observer", "观察者必须实现update方法")
        self._observers.subscribe(observer)
        logger.debug(f"商店 {self._name} 注册观察者: {observer!r}")

    def remove_observer(self, observer: StoreObserver) -> None:
        """
        移除观察者。只移除第一个匹配的条目，观察者不存在时不做任何事。

        Args:
            observer: 观察者

        Raises:
            ValidationException: 观察者为空时抛出
        """
        if observer is None:
            raise ValidationException("observer", "观察者不能为空")
        if self._observers.unsubscribe(observer):
            logger.debug(f"商店 {self._name} 移除观察者: {observer!r}")

    def notify(self, event: StoreEvent) -> None:
        """
        通知所有观察者。
        这是所有修改操作发出事件的唯一途径。观察者抛出的异常直接传播，
        之后的观察者将不会收到该事件。

        Args:
            event: 商店事件
        """
        logger.debug(f"商店 {self._name} 发出事件 {event.event_type}: {event.product!r}，观察者数量: {len(self._observers)}")
        self._observers.publish(event)

    # 商品目录

    def get_products(self) -> List[Product]:
        """
        获取商店所有商品。

        Returns:
            商品列表的副本，调用方不应依赖其顺序
        """
        return list(self._inventory.keys())

    def create_product(self, name: str, base_price: float, inventory: int) -> Product:
        """
        创建商品并加入商店目录，初始折扣为0。不发出事件。

        Args:
            name: 商品名称
            base_price: 基础价格，不能为负数或0
            inventory: 初始库存，非负整数

        Returns:
            新创建的商品

        Raises:
            ValidationException: 参数无效时抛出
        """
        if name is None:
            raise ValidationException("name", "商品名称不能为空")
        if base_price is None or base_price < 0:
            raise ValidationException("base_price", f"基础价格不能为负数: {base_price}")
        if not _is_count(inventory) or inventory < 0:
            raise ValidationException("inventory", f"库存必须是非负整数: {inventory!r}")

        product = Product(name, base_price)
        self._inventory[product] = inventory
        self._discount[product] = 0.0

        logger.info(f"商店 {self._name} 新增商品: {name}，价格: {base_price}，库存: {inventory}")
        return product

    # 库存

    def purchase_product(self, product: Product) -> ReceiptItem:
        """
        购买一件商品。
        先发出购买事件再扣减库存；扣减后库存为0时再发出售罄事件。

        Args:
            product: 商品

        Returns:
            本次购买的收据条目

        Raises:
            ValidationException: 商品为空时抛出
            ProductNotFoundException: 商品不在该商店时抛出
            OutOfStockException: 商品已售罄时抛出
        """
        self._require_product(product)
        if self._inventory[product] == 0:
            logger.warning(f"商品 {product.name} 已售罄，无法购买")
            raise OutOfStockException(product.id)

        self.notify(PurchaseEvent(product, self))
        self._inventory[product] -= 1
        receipt = ReceiptItem(product.name, self.get_sale_price(product), self._name)
        logger.info(f"商店 {self._name} 售出商品: {product.name}，价格: {receipt.price}，剩余库存: {self._inventory[product]}")

        if not self.is_in_stock(product):
            logger.warning(f"商品 {product.name} 已售罄")
            self.notify(OutOfStockEvent(product, self))
        return receipt

    def restock_product(self, product: Product, num_items: int) -> None:
        """
        补货。
        补货前库存为0时，先发出补货事件再增加库存。

        Args:
            product: 商品
            num_items: 补货数量，非负整数

        Raises:
            ValidationException: 商品为空或补货数量不是非负整数时抛出
            ProductNotFoundException: 商品不在该商店时抛出
        """
        if product is None:
            raise ValidationException("product", "商品不能为空")
        if not _is_count(num_items) or num_items < 0:
            raise ValidationException("num_items", f"补货数量必须是非负整数: {num_items!r}")
        self._require_product(product)

        if not self.is_in_stock(product):
            self.notify(BackInStockEvent(product, self))
        self._inventory[product] += num_items
        logger.info(f"商店 {self._name} 补货商品: {product.name}，数量: {num_items}，当前库存: {self._inventory[product]}")

    def get_product_inventory(self, product: Product) -> int:
        """
        获取商品库存。

        Args:
            product: 商品

        Returns:
            库存数量
        """
        self._require_product(product)
        return self._inventory[product]

    def is_in_stock(self, product: Product) -> bool:
        """
        判断商品是否有货。

        Args:
            product: 商品

        Returns:
            库存大于0返回True，否则返回False
        """
        return self.get_product_inventory(product) > 0

    # 促销

    def start_sale(self, product: Product, percent_off: float) -> None:
        """
        开始促销，设置商品的折扣并发出促销开始事件。
        无论折扣是否变化都会发出事件。

        Args:
            product: 商品
            percent_off: 折扣比例，取值范围[0.0, 1.0]

        Raises:
            ValidationException: 商品为空或折扣超出范围时抛出
            ProductNotFoundException: 商品不在该商店时抛出
        """
        self._require_product(product)
        if percent_off is None or not DISCOUNT_MIN <= percent_off <= DISCOUNT_MAX:
            raise ValidationException("percent_off", f"折扣必须在{DISCOUNT_MIN}到{DISCOUNT_MAX}之间: {percent_off}")

        self._discount[product] = percent_off
        logger.info(f"商店 {self._name} 商品 {product.name} 开始促销，折扣: {percent_off}")
        self.notify(SaleStartEvent(product, self))

    def end_sale(self, product: Product) -> None:
        """
        结束促销，折扣重置为0并发出促销结束事件。
        即使商品没有在促销也会发出事件。

        Args:
            product: 商品

        Raises:
            ValidationException: 商品为空时抛出
            ProductNotFoundException: 商品不在该商店时抛出
        """
        self._require_product(product)
        self._discount[product] = 0.0
        logger.info(f"商店 {self._name} 商品 {product.name} 结束促销")
        self.notify(SaleEndEvent(product, self))

    def get_discount(self, product: Product) -> float:
        """
        获取商品当前的折扣比例。

        Args:
            product: 商品

        Returns:
            折扣比例，没有促销时为0.0
        """
        self._require_product(product)
        return self._discount[product]

    def get_sale_price(self, product: Product) -> float:
        """
        获取商品售价。
        售价 = 基础价格 × (1 - 折扣)，按四舍五入（ROUND_HALF_UP）精确到分。

        Args:
            product: 商品

        Returns:
            售价
        """
        self._require_product(product)
        base_price = Decimal(str(product.base_price))
        discount = Decimal(str(self._discount[product]))
        return float(_round_price(base_price * (Decimal(1) - discount)))

    def is_on_sale(self, product: Product) -> bool:
        """
        判断商品是否在促销。
        只有售价严格低于基础价格才算促销，折扣为0或舍入后与原价相同都不算。
        基础价格按与售价相同的方式精确到分后再比较。

        Args:
            product: 商品

        Returns:
            在促销返回True，否则返回False
        """
        sale_price = self.get_sale_price(product)
        return sale_price < float(_round_price(Decimal(str(product.base_price))))

    def check_invariants(self) -> bool:
        """
        检查商店的不变性规则：
        库存表和折扣表的商品相同，库存不为负数，折扣在[0.0, 1.0]之间。

        Returns:
            如果所有不变性规则都满足，则返回True；否则返回False
        """
        if self._inventory.keys() != self._discount.keys():
            return False
        if any(count < 0 for count in self._inventory.values()):
            return False
        return all(DISCOUNT_MIN <= discount <= DISCOUNT_MAX for discount in self._discount.values())

    def _require_product(self, product: Any) -> None:
        """
        校验商品参数：先检查是否为空，再检查是否属于该商店。

        Raises:
            ValidationException: 商品为空时抛出
            ProductNotFoundException: 商品不在该商店时抛出
        """
        if product is None:
            raise ValidationException("product", "商品不能为空")
        if product not in self._inventory:
            raise ProductNotFoundException(getattr(product, "id", product))
