"""
领域异常模块。
包含领域模型中使用的各种异常类。
"""
from typing import Any, Optional


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """
    实体状态无效异常。
    当实体处于无效状态时抛出。
    """

    def __init__(self, entity_name: str, reason: str):
        """
        初始化实体状态无效异常。

        Args:
            entity_name: 实体名称
            reason: 无效原因
        """
        message = f"{entity_name}处于无效状态: {reason}"
        super().__init__(message)
        self.entity_name = entity_name
        self.reason = reason


class EntityNotFoundException(DomainException):
    """
    实体未找到异常。
    当请求的实体不存在时抛出。
    """

    def __init__(self, entity_name: str, entity_id: Any):
        """
        初始化实体未找到异常。

        Args:
            entity_name: 实体名称
            entity_id: 实体ID
        """
        message = f"无法找到{entity_name}: ID={entity_id}"
        super().__init__(message)
        self.entity_name = entity_name
        self.entity_id = entity_id


class InsufficientStockException(DomainException):
    """
    库存不足异常。
    当商品库存不足以满足请求时抛出。
    """

    def __init__(self, product_id: Any, requested: int, available: int):
        """
        初始化库存不足异常。

        Args:
            product_id: 商品ID
            requested: 请求数量
            available: 可用数量
        """
        message = f"商品(ID={product_id})库存不足，请求:{requested}，可用:{available}"
        super().__init__(message)
        self.product_id = product_id
        self.requested = requested
        self.available = available


class ValidationException(DomainException):
    """
    数据验证异常。
    当参数缺失或取值超出允许范围时抛出。
    """

    def __init__(self, field_name: Optional[str] = None, message: str = "数据验证失败"):
        """
        初始化数据验证异常。

        Args:
            field_name: 字段名称
            message: 异常消息
        """
        if field_name:
            full_message = f"字段'{field_name}'验证失败: {message}"
        else:
            full_message = message
        super().__init__(full_message)
        self.field_name = field_name
