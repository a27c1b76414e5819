"""
Typed signal and message contracts shared by the controller and the views.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class AppSignal(str, Enum):
    """Transition requests returned by a view's key handler."""

    NONE = "none"
    EXIT = "exit"
    OPEN_SORTING = "open_sorting"
    OPEN_KEY_MAPPING = "open_key_mapping"
    OPEN_NEW_FILE = "open_new_file"
    OPEN_TEXT_FIELD = "open_text_field"
    OPEN_CONFIRMATION = "open_confirmation"
    CLOSE_POPUP = "close_popup"
    CHANGE_TO_EXPLORER = "change_to_explorer"


class AppWindow(int, Enum):
    """Base view slots owned by the controller."""

    EXPLORER = 0


class MessageType(str, Enum):
    """Kinds of values exchanged between a popup and its requester."""

    EMPTY = "empty"
    TEXT = "text"
    FLAG = "flag"


@dataclass(frozen=True)
class Message:
    """Single value handed over when a popup is opened or closed."""

    type: MessageType
    payload: Any = None

    @classmethod
    def empty(cls):
        return cls(MessageType.EMPTY)

    @classmethod
    def text(cls, value):
        return cls(MessageType.TEXT, str(value))

    @classmethod
    def flag(cls, value):
        return cls(MessageType.FLAG, bool(value))

    def text_value(self):
        """Return payload when this is a text message, else None."""
        if self.type == MessageType.TEXT:
            return self.payload
        return None

    def flag_value(self):
        """Return payload when this is a flag message, else None."""
        if self.type == MessageType.FLAG:
            return self.payload
        return None
