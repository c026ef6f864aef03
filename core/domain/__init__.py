"""
领域模型包。
提供实体、值对象、聚合根和领域事件等领域驱动设计(DDD)的核心概念。
"""

# 基础类
from core.domain.base import Entity
from core.domain.value_objects import ValueObject
from core.domain.aggregates import AggregateRoot

# 领域事件
from core.domain.events import (
    DomainEvent,
    EventHandler,
    EventPublisher,
)

# 领域异常
from core.domain.exceptions import (
    DomainException,
    InvalidEntityStateException,
    EntityNotFoundException,
    InsufficientStockException,
    ValidationException,
)

__all__ = [
    # 基础类
    'Entity',
    'ValueObject',
    'AggregateRoot',

    # 领域事件
    'DomainEvent',
    'EventHandler',
    'EventPublisher',

    # 领域异常
    'DomainException',
    'InvalidEntityStateException',
    'EntityNotFoundException',
    'InsufficientStockException',
    'ValidationException',
]
