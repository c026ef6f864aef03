"""
共享领域内核的测试：实体、值对象、聚合根、事件发布器和异常。
"""
import uuid

import pytest

from core.domain import (
    AggregateRoot,
    DomainEvent,
    DomainException,
    Entity,
    EntityNotFoundException,
    EventPublisher,
    InsufficientStockException,
    InvalidEntityStateException,
    ValidationException,
    ValueObject,
)


class _Event(DomainEvent):
    event_type = "test"


class _AlwaysEqual:
    """与任何对象都相等，用于验证按标识移除"""

    def __init__(self):
        self.received = []

    def __eq__(self, other):
        return True

    def __hash__(self):
        return 0

    def __call__(self, event):
        self.received.append(event)


class _Point(ValueObject):
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self._freeze()


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------

class TestEntity:
    """实体按标识判断相等"""

    def test_generates_uuid(self):
        assert isinstance(Entity().id, uuid.UUID)

    def test_distinct_entities_not_equal(self):
        assert Entity() != Entity()

    def test_same_id_equal_and_same_hash(self):
        a, b = Entity(id=7), Entity(id=7)
        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal_to_other_types(self):
        assert Entity(id=1) != 1


# ---------------------------------------------------------------------------
# ValueObject
# ---------------------------------------------------------------------------

class TestValueObject:

    def test_equality_by_value(self):
        assert _Point(1, 2) == _Point(1, 2)
        assert _Point(1, 2) != _Point(2, 1)
        assert hash(_Point(1, 2)) == hash(_Point(1, 2))

    def test_frozen_after_init(self):
        point = _Point(1, 2)
        with pytest.raises(AttributeError):
            point.x = 5
        assert point.x == 1


# ---------------------------------------------------------------------------
# AggregateRoot
# ---------------------------------------------------------------------------

class TestAggregateRoot:

    def test_default_invariants_hold(self):
        root = AggregateRoot()
        assert root.check_invariants() is True
        root.assert_invariants()

    def test_assert_invariants_raises_when_broken(self):
        class Broken(AggregateRoot):
            def check_invariants(self):
                return False

        with pytest.raises(InvalidEntityStateException) as exc_info:
            Broken().assert_invariants()
        assert exc_info.value.entity_name == "Broken"


# ---------------------------------------------------------------------------
# EventPublisher
# ---------------------------------------------------------------------------

class TestEventPublisher:
    """按注册顺序同步发布，允许重复注册，按标识移除第一个"""

    def test_publish_in_registration_order(self):
        publisher = EventPublisher()
        calls = []
        publisher.subscribe(lambda e: calls.append("first"))
        publisher.subscribe(lambda e: calls.append("second"))

        publisher.publish(_Event())

        assert calls == ["first", "second"]

    def test_duplicates_receive_twice(self):
        publisher = EventPublisher()
        received = []
        handler = received.append
        publisher.subscribe(handler)
        publisher.subscribe(handler)

        publisher.publish(_Event())

        assert len(received) == 2
        assert len(publisher) == 2

    def test_unsubscribe_removes_first_identical_entry(self):
        publisher = EventPublisher()
        a, b = _AlwaysEqual(), _AlwaysEqual()
        publisher.subscribe(a)
        publisher.subscribe(b)

        assert publisher.unsubscribe(b) is True
        assert publisher.handlers[0] is a
        assert len(publisher) == 1

    def test_unsubscribe_missing_is_noop(self):
        publisher = EventPublisher()
        publisher.subscribe(print)
        assert publisher.unsubscribe(len) is False
        assert len(publisher) == 1

    def test_handlers_is_a_copy(self):
        publisher = EventPublisher()
        publisher.subscribe(print)
        publisher.handlers.clear()
        assert len(publisher) == 1

    def test_handler_exception_stops_delivery(self):
        publisher = EventPublisher()
        later = []

        def boom(event):
            raise RuntimeError("boom")

        publisher.subscribe(boom)
        publisher.subscribe(later.append)

        with pytest.raises(RuntimeError):
            publisher.publish(_Event())
        assert later == []

    def test_unsubscribe_during_publish_uses_snapshot(self):
        publisher = EventPublisher()
        calls = []

        def once(event):
            calls.append("once")
            publisher.unsubscribe(once)

        publisher.subscribe(once)
        publisher.subscribe(lambda e: calls.append("after"))

        publisher.publish(_Event())
        publisher.publish(_Event())

        assert calls == ["once", "after", "after"]

    def test_custom_invoke(self):
        received = []

        class Listener:
            def update(self, event):
                received.append(event)

        publisher = EventPublisher(invoke=lambda listener, event: listener.update(event))
        publisher.subscribe(Listener())
        event = _Event()
        publisher.publish(event)

        assert received == [event]

    def test_clear(self):
        publisher = EventPublisher()
        publisher.subscribe(print)
        publisher.clear()
        assert len(publisher) == 0


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class TestExceptions:

    def test_validation_message_includes_field(self):
        exc = ValidationException("price", "不能为负数")
        assert exc.field_name == "price"
        assert "price" in exc.message
        assert isinstance(exc, DomainException)

    def test_validation_without_field(self):
        assert ValidationException().message == "数据验证失败"

    def test_not_found_carries_id(self):
        exc = EntityNotFoundException("商品", 42)
        assert exc.entity_id == 42
        assert "42" in str(exc)

    def test_insufficient_stock_fields(self):
        exc = InsufficientStockException("p1", requested=3, available=1)
        assert (exc.product_id, exc.requested, exc.available) == ("p1", 3, 1)
