import logging
from dataclasses import FrozenInstanceError

import pytest

from backpack_engine.engine import (
    ClearResult,
    InventoryEngine,
    inventory_to_dict,
    stack_to_dict,
)
from backpack_engine.errors import (
    BackpackFullError,
    InvalidItemError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from backpack_engine.types import TaskTargetState
from tests.test_utils import FailingNotifier, FakeClock, make_engine, make_item


def test_new_engine_is_empty() -> None:
    engine = InventoryEngine()
    snapshot = engine.get_inventory()
    assert snapshot.count == 0
    assert snapshot.max_slots == 32
    assert list(snapshot.items) == []


def test_add_item_notifies() -> None:
    engine, notifier = make_engine()
    stack = engine.add_item(make_item("gold-1", "Gold"), 5)
    assert stack.quantity == 5
    assert notifier.sent == [
        ("backpack_item_added_gold-1", TaskTargetState.NOT_ACTIVE_TO_COMPLETED)
    ]


def test_quantity_defaults_to_one() -> None:
    engine, _ = make_engine()
    assert engine.add_item(make_item("gold")).quantity == 1
    assert engine.remove_item("gold") is None


def test_stacking_notifies_each_time() -> None:
    engine, notifier = make_engine()
    engine.add_item(make_item("gold"), 2)
    engine.add_item(make_item("gold"), 3)
    assert engine.get_item("gold").quantity == 5
    assert notifier.task_names == ["backpack_item_added_gold"] * 2


def test_added_at_is_first_insertion_time() -> None:
    clock = FakeClock(start=0.0)
    engine = InventoryEngine(clock=clock)
    first = engine.add_item(make_item("gold"), 1)
    second = engine.add_item(make_item("gold"), 1)
    assert first.added_at == 1.0
    assert second.added_at == 1.0


def test_full_backpack_notifies_and_raises() -> None:
    engine, notifier = make_engine(max_slots=1)
    engine.add_item(make_item("gold"))
    notifier.sent.clear()
    with pytest.raises(BackpackFullError):
        engine.add_item(make_item("silver"))
    assert notifier.sent == [("backpack_full", TaskTargetState.NOT_ACTIVE_TO_ACTIVE)]
    assert engine.get_item("silver") is None
    assert engine.get_inventory().count == 1


def test_invalid_add_emits_nothing() -> None:
    engine, notifier = make_engine()
    with pytest.raises(InvalidItemError):
        engine.add_item(make_item("gold", ""))
    with pytest.raises(InvalidQuantityError):
        engine.add_item(make_item("gold"), 0)
    assert notifier.sent == []
    assert engine.get_inventory().count == 0


def test_remove_item_partial_and_full() -> None:
    engine, notifier = make_engine()
    engine.add_item(make_item("gold"), 5)
    remaining = engine.remove_item("gold", 2)
    assert remaining is not None and remaining.quantity == 3
    assert engine.remove_item("gold", 3) is None
    assert engine.get_item("gold") is None
    removed = ("backpack_item_removed_gold", TaskTargetState.ACTIVE_TO_COMPLETED)
    assert notifier.sent[1:] == [removed, removed]


def test_remove_missing_item_emits_nothing() -> None:
    engine, notifier = make_engine()
    with pytest.raises(ItemNotFoundError):
        engine.remove_item("ghost")
    assert notifier.sent == []


def test_remove_logs_full_vs_partial(caplog: pytest.LogCaptureFixture) -> None:
    engine, _ = make_engine()
    engine.add_item(make_item("gold", "Gold Coin"), 5)
    with caplog.at_level(logging.DEBUG, logger="backpack_engine.engine"):
        engine.remove_item("gold", 2)
        engine.remove_item("gold", 10)
    assert "Removed 2 Gold Coin (3 left)" in caplog.messages
    assert "Removed all Gold Coin" in caplog.messages


def test_clear_backpack() -> None:
    engine, notifier = make_engine()
    engine.add_item(make_item("gold"), 5)
    engine.add_item(make_item("silver"), 1)
    assert engine.clear_backpack() == ClearResult(cleared_count=2)
    assert engine.get_inventory().count == 0
    assert notifier.sent[-1] == ("backpack_cleared", TaskTargetState.ACTIVE_TO_COMPLETED)


def test_clear_empty_backpack_still_notifies() -> None:
    engine, notifier = make_engine()
    assert engine.clear_backpack().cleared_count == 0
    assert notifier.task_names == ["backpack_cleared"]


def test_custom_task_prefix() -> None:
    engine, notifier = make_engine(max_slots=1, prefix="pack")
    engine.add_item(make_item("gold"))
    with pytest.raises(BackpackFullError):
        engine.add_item(make_item("ore"))
    engine.remove_item("gold")
    engine.clear_backpack()
    assert notifier.task_names == [
        "pack_item_added_gold",
        "pack_full",
        "pack_item_removed_gold",
        "pack_cleared",
    ]


def test_snapshot_cannot_mutate_engine() -> None:
    engine, _ = make_engine()
    engine.add_item(make_item("gold"), 5)
    snapshot = engine.get_inventory()
    grown = snapshot.items.append(snapshot.items[0])
    assert len(grown) == 2
    assert engine.get_inventory().count == 1
    with pytest.raises(FrozenInstanceError):
        snapshot.items[0].quantity = 99  # type: ignore[misc]
    assert engine.get_item("gold").quantity == 5


def test_snapshot_is_stable_after_mutation() -> None:
    engine, _ = make_engine()
    engine.add_item(make_item("gold"), 5)
    snapshot = engine.get_inventory()
    engine.add_item(make_item("gold"), 5)
    engine.add_item(make_item("ore"), 1)
    assert snapshot.count == 1
    assert snapshot.items[0].quantity == 5


def test_notifier_failure_does_not_roll_back(caplog: pytest.LogCaptureFixture) -> None:
    notifier = FailingNotifier()
    engine = InventoryEngine(max_slots=1, notifier=notifier)
    with caplog.at_level(logging.ERROR, logger="backpack_engine.engine"):
        stack = engine.add_item(make_item("gold"), 3)
        with pytest.raises(BackpackFullError):
            engine.add_item(make_item("ore"))
        engine.remove_item("gold", 1)
        engine.clear_backpack()
    assert stack.quantity == 3
    assert engine.get_inventory().count == 0
    assert notifier.calls == 4
    assert "Failed to send task backpack_item_added_gold" in caplog.messages


def test_serialization() -> None:
    engine, _ = make_engine(max_slots=4)
    stack = engine.add_item(make_item("gold-1", "Gold", tags=["coin"]), 2)
    assert stack_to_dict(stack) == {
        "id": "gold-1",
        "name": "Gold",
        "category": "gold",
        "quantity": 2,
        "metadata": {"tags": ["coin"]},
        "addedAt": stack.added_at,
    }
    assert inventory_to_dict(engine.get_inventory()) == {
        "items": [stack_to_dict(stack)],
        "count": 1,
        "maxSlots": 4,
    }


def test_invalid_max_slots() -> None:
    with pytest.raises(ValueError):
        InventoryEngine(max_slots=0)
