"""Actions: the unit of work handed from the input layer to the dispatcher.

An action is a type tag plus an optional string payload, e.g. the text
``exec identify {}`` parses into ``Action(ActionType.EXEC, "identify {}")``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActionType(Enum):
    # built-in, handled by the dispatcher
    INFO = "info"
    STATUS = "status"
    FULLSCREEN = "fullscreen"
    MODE = "mode"
    EXEC = "exec"
    MARK = "mark"
    EXEC_MARKED = "exec_marked"
    HELP = "help"
    EXIT = "exit"

    # viewer mode
    FIRST_FILE = "first_file"
    LAST_FILE = "last_file"
    PREV_FILE = "prev_file"
    NEXT_FILE = "next_file"

    # gallery mode
    STEP_LEFT = "step_left"
    STEP_RIGHT = "step_right"
    STEP_UP = "step_up"
    STEP_DOWN = "step_down"


# Types whose payload is required (an empty string is still a payload).
PAYLOAD_TYPES = frozenset(
    {
        ActionType.INFO,
        ActionType.STATUS,
        ActionType.MODE,
        ActionType.EXEC,
        ActionType.EXEC_MARKED,
    }
)

# Built-in types that take no payload at all.
FLAG_TYPES = frozenset(
    {
        ActionType.FULLSCREEN,
        ActionType.MARK,
        ActionType.HELP,
        ActionType.EXIT,
    }
)


@dataclass(frozen=True)
class Action:
    type: ActionType
    params: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, ActionType):
            raise TypeError(f"action type must be ActionType, got {type(self.type).__name__}")
        if self.params is not None and not isinstance(self.params, str):
            raise TypeError("action params must be a string")
        if self.type in PAYLOAD_TYPES and self.params is None:
            raise ValueError(f"action '{self.type.value}' requires parameters")
        if self.type in FLAG_TYPES and self.params:
            raise ValueError(f"action '{self.type.value}' does not take parameters")

    @property
    def typename(self) -> str:
        return self.type.value

    @classmethod
    def parse(cls, text: str) -> Action:
        """Build an action from its textual form: ``<name> [params]``."""
        stripped = str(text or "").strip()
        if not stripped:
            raise ValueError("empty action")
        name, *rest = stripped.split(None, 1)
        try:
            action_type = ActionType(name)
        except ValueError:
            raise ValueError(f"unknown action: {name}") from None
        params: str | None = rest[0].strip() if rest else ""
        if not params and action_type not in PAYLOAD_TYPES:
            params = None
        return cls(action_type, params)

    def __str__(self) -> str:
        if self.params:
            return f"{self.typename} {self.params}"
        return self.typename
