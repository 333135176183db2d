import json
import logging

import pytest

from backpack_engine.notifier import (
    MessageNotifier,
    NullNotifier,
    TaskNames,
    TaskNotification,
)
from backpack_engine.types import TaskTargetState


def test_task_names_default_prefix() -> None:
    names = TaskNames()
    assert names.full() == "backpack_full"
    assert names.item_added("gold-1") == "backpack_item_added_gold-1"
    assert names.item_removed("gold-1") == "backpack_item_removed_gold-1"
    assert names.cleared() == "backpack_cleared"


def test_task_names_custom_prefix() -> None:
    assert TaskNames("satchel").item_added("ore") == "satchel_item_added_ore"


def test_wire_message_shape() -> None:
    notification = TaskNotification(
        "backpack_full", TaskTargetState.NOT_ACTIVE_TO_ACTIVE
    )
    assert notification.to_message() == {
        "TaskName": "backpack_full",
        "TaskTargetState": "SetNotActiveToActive",
    }
    assert json.loads(notification.to_json()) == notification.to_message()


def test_wire_keeps_unicode_item_ids() -> None:
    notification = TaskNotification(
        "backpack_item_added_épée", TaskTargetState.NOT_ACTIVE_TO_COMPLETED
    )
    assert "épée" in notification.to_json()


def test_message_notifier_sends_json(caplog: pytest.LogCaptureFixture) -> None:
    sent: list[str] = []
    notifier = MessageNotifier(sent.append)
    with caplog.at_level(logging.DEBUG, logger="backpack_engine.notifier"):
        notifier.notify("backpack_cleared", TaskTargetState.ACTIVE_TO_COMPLETED)
    assert [json.loads(m) for m in sent] == [
        {"TaskName": "backpack_cleared", "TaskTargetState": "SetActiveToCompleted"}
    ]
    assert "Sent task: backpack_cleared -> ActiveToCompleted" in caplog.messages


def test_message_notifier_propagates_send_errors() -> None:
    def send(message: str) -> None:
        raise ConnectionError("bridge closed")

    with pytest.raises(ConnectionError):
        MessageNotifier(send).notify("backpack_full", TaskTargetState.NOT_ACTIVE_TO_ACTIVE)


def test_null_notifier_accepts_anything() -> None:
    assert NullNotifier().notify("x", TaskTargetState.ACTIVE_TO_COMPLETED) is None
