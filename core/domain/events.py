"""
领域事件模块。
包含DomainEvent基类和EventPublisher发布器，用于领域事件的发布和订阅。
"""
from typing import Any, Callable, ClassVar, List, Optional


class DomainEvent:
    """
    领域事件基类。
    领域事件表示领域模型中发生的重要事件。
    每个子类通过event_type标签标识自己代表的事件种类。
    """

    event_type: ClassVar[str] = ""


# 事件处理器类型
EventHandler = Callable[[DomainEvent], None]


def _call_handler(handler: Any, event: DomainEvent) -> None:
    handler(event)


class EventPublisher:
    """
    领域事件发布器。
    负责事件的发布和订阅，每个聚合持有自己的实例，不存在全局注册表。

    订阅者按注册顺序保存，允许重复注册；取消订阅时只移除第一个
    与之为同一对象的条目。发布是同步的，处理器抛出的异常不会被捕获，
    后续处理器将不会收到该事件。
    """

    def __init__(self, invoke: Optional[Callable[[Any, DomainEvent], None]] = None):
        """
        初始化事件发布器。

        Args:
            invoke: 调用订阅者的方式，默认把订阅者当作函数调用
        """
        self._handlers: List[Any] = []
        self._invoke = invoke or _call_handler

    @property
    def handlers(self) -> List[Any]:
        """获取订阅者列表的副本"""
        return list(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: Any) -> None:
        """
        注册订阅者。

        Args:
            handler: 订阅者
        """
        self._handlers.append(handler)

    def unsubscribe(self, handler: Any) -> bool:
        """
        取消订阅。
        按对象标识查找，只移除第一个匹配的条目，不存在时不做任何事。

        Args:
            handler: 订阅者

        Returns:
            移除成功返回True，未找到返回False
        """
        for index, registered in enumerate(self._handlers):
            if registered is handler:
                del self._handlers[index]
                return True
        return False

    def publish(self, event: DomainEvent) -> None:
        """
        发布事件。
        按注册顺序调用所有订阅者。

        Args:
            event: 要发布的事件
        """
        # 遍历快照，处理器在回调中增删订阅者不影响本次发布
        for handler in list(self._handlers):
            self._invoke(handler, event)

    def clear(self) -> None:
        """
        清除所有订阅者。
        """
        self._handlers.clear()
