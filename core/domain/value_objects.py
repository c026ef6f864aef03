"""
值对象模块。
包含ValueObject基类，供收据等不可变记录使用。
"""
from typing import Any


class ValueObject:
    """
    值对象基类。
    值对象是通过其属性值而非标识定义的不可变对象。
    相同属性值的值对象被视为相等。
    """

    def __eq__(self, other: Any) -> bool:
        """
        判断两个值对象是否相等，通过比较它们的属性值。

        Args:
            other: 另一个值对象

        Returns:
            如果两个值对象的属性值相等，则返回True；否则返回False
        """
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        """
        计算值对象的哈希值，基于其属性值。

        Returns:
            值对象属性值的哈希值
        """
        # 将__dict__转换为可哈希类型(frozenset)
        items = frozenset((k, hash(v)) for k, v in self.__dict__.items())
        return hash(items)

    def __setattr__(self, name: str, value: Any) -> None:
        # 构造完成后禁止修改
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__}是不可变对象，不能修改属性'{name}'")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        """
        冻结值对象，子类在__init__末尾调用。
        """
        object.__setattr__(self, '_frozen', True)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{k.lstrip('_')}={v!r}" for k, v in self.__dict__.items() if k != '_frozen'
        )
        return f"{self.__class__.__name__}({fields})"
