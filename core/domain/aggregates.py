"""
聚合根模块。
包含AggregateRoot基类，用于定义领域聚合的边界和不变性规则。
"""
from typing import Any

from core.domain.base import Entity
from core.domain.exceptions import InvalidEntityStateException


class AggregateRoot(Entity):
    """
    聚合根基类。
    聚合根是一个特殊的实体，它定义了一个聚合的边界，
    并负责维护聚合内部对象的不变性规则。
    它是外部访问聚合内部对象的唯一入口点。
    """

    def __init__(self, id: Any = None):
        """
        初始化聚合根。

        Args:
            id: 聚合根标识，如果未提供，将自动生成UUID
        """
        super().__init__(id)

    def check_invariants(self) -> bool:
        """
        检查聚合的不变性规则。
        子类应该重写此方法以实现特定的业务规则验证。

        Returns:
            如果所有不变性规则都满足，则返回True；否则返回False
        """
        return True

    def assert_invariants(self) -> None:
        """
        断言聚合满足不变性规则。

        Raises:
            InvalidEntityStateException: 不变性规则被破坏时抛出
        """
        if not self.check_invariants():
            raise InvalidEntityStateException(self.__class__.__name__, "不变性规则检查未通过")
