"""Host action enumeration.

Values are the literal ``action`` strings the host places in its messages.
``MUTATING_ACTIONS`` lists the actions that change backpack state; checks like
``if action in MUTATING_ACTIONS`` are preferred over comparing names.
"""

from enum import StrEnum


class Action(StrEnum):
    """String enum of host commands.

    Members:
        ADD_ITEM: Add (or stack) an item.
        REMOVE_ITEM: Remove some or all of a stack.
        CLEAR_BACKPACK: Drop every stack.
        GET_INVENTORY: Read-only snapshot request.
    """

    ADD_ITEM = "addItem"
    REMOVE_ITEM = "removeItem"
    CLEAR_BACKPACK = "clearBackpack"
    GET_INVENTORY = "getInventory"


MUTATING_ACTIONS = [Action.ADD_ITEM, Action.REMOVE_ITEM, Action.CLEAR_BACKPACK]
