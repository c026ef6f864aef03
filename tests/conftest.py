"""
测试共享夹具。
"""
import os

# 必须在导入项目模块之前设置，settings在导入时选择配置模块
os.environ.setdefault("SHOP_ENV", "testing")

import pytest
from loguru import logger

from shopping.domain import Store, StoreObserver


class RecordingObserver(StoreObserver):
    """记录收到的所有事件，以及收到事件时商品的库存"""

    def __init__(self, log=None, label=None):
        self.events = []
        self.inventory_seen = []
        self._log = log
        self._label = label

    def update(self, event):
        self.events.append(event)
        self.inventory_seen.append(event.store.get_product_inventory(event.product))
        if self._log is not None:
            self._log.append(self._label)

    @property
    def event_types(self):
        return [event.event_type for event in self.events]

    def clear(self):
        self.events.clear()
        self.inventory_seen.clear()


class FailingObserver(StoreObserver):
    """收到事件时抛出异常"""

    def __init__(self):
        self.calls = 0

    def update(self, event):
        self.calls += 1
        raise RuntimeError(f"observer failed on {event.event_type}")


@pytest.fixture
def store() -> Store:
    return Store("Acme")


@pytest.fixture
def recorder(store) -> RecordingObserver:
    observer = RecordingObserver()
    store.add_observer(observer)
    return observer


@pytest.fixture
def widget(store):
    return store.create_product("Widget", 20.00, 1)


@pytest.fixture
def caplog(caplog):
    """把loguru的日志转发给pytest的caplog"""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)
