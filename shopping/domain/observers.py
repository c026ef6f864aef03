"""
商店观察者。
定义StoreObserver接口以及基于回调和事件类型分发的实现。
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List

from core.domain import ValidationException
from shopping.domain.events import StoreEvent, StoreEventType

# 商店事件处理器类型
StoreEventHandler = Callable[[StoreEvent], None]


class StoreObserver(ABC):
    """
    商店观察者接口。
    商店在状态变化时同步调用update，返回值被忽略；
    update抛出的异常不会被商店捕获，会直接传播给触发操作的调用方。
    """

    @abstractmethod
    def update(self, event: StoreEvent) -> None:
        """
        接收商店事件。

        Args:
            event: 商店事件
        """
        pass


class CallbackObserver(StoreObserver):
    """
    回调观察者。
    把普通函数包装成观察者。
    """

    def __init__(self, callback: StoreEventHandler):
        """
        初始化回调观察者。

        Args:
            callback: 接收事件的函数

        Raises:
            ValidationException: 回调不可调用时抛出
        """
        if not callable(callback):
            raise ValidationException("callback", "回调必须是可调用对象")
        self._callback = callback

    def update(self, event: StoreEvent) -> None:
        self._callback(event)


class EventTypeObserver(StoreObserver):
    """
    按事件类型分发的观察者。
    为每种事件类型注册处理器，收到事件时只调用该类型的处理器，
    其他类型的事件被忽略。
    """

    def __init__(self):
        self._handlers: Dict[str, List[StoreEventHandler]] = {}

    def on(self, event_type: str, handler: StoreEventHandler) -> 'EventTypeObserver':
        """
        注册事件处理器。

        Args:
            event_type: 事件类型，取值见StoreEventType
            handler: 事件处理器函数

        Returns:
            观察者自身，便于链式注册

        Raises:
            ValidationException: 事件类型未知时抛出
        """
        if event_type not in StoreEventType.ALL:
            raise ValidationException("event_type", f"未知的事件类型: {event_type}")
        self._handlers.setdefault(event_type, []).append(handler)
        return self

    def update(self, event: StoreEvent) -> None:
        for handler in list(self._handlers.get(event.event_type, [])):
            handler(event)
