from __future__ import annotations

from abc import ABC, abstractmethod
from typing import NamedTuple

from viewer_actions.actions import Action
from viewer_actions.app.state.viewer_state import ViewerState
from viewer_actions.image_list import Image, ImageList
from viewer_actions.infra.logger import get_logger

_logger = get_logger("modes")


class Keybind(NamedTuple):
    key: str
    action: Action

    def __str__(self) -> str:
        return f"{self.key}: {self.action}"


def parse_keybinds(table: dict[str, str]) -> list[Keybind]:
    """Turn a key -> action text table into keybinds, skipping bad entries."""
    binds: list[Keybind] = []
    for key, text in table.items():
        try:
            binds.append(Keybind(key, Action.parse(text)))
        except ValueError as e:
            _logger.warning("ignoring keybinding %s=%r: %s", key, text, e)
    return binds


class Mode(ABC):
    """One application mode (viewer, gallery).

    The dispatcher handles built-in actions itself and hands every other
    action to the active mode.
    """

    name: str = ""

    def __init__(
        self,
        images: ImageList,
        state: ViewerState,
        keybinds: list[Keybind] | None = None,
    ) -> None:
        self.images = images
        self.state = state
        self._keybinds = list(keybinds or [])

    def get_current(self) -> Image | None:
        return self.images.current

    def get_keybinds(self) -> list[Keybind]:
        return list(self._keybinds)

    def find_keybind(self, key: str) -> Action | None:
        for bind in self._keybinds:
            if bind.key == key:
                return bind.action
        return None

    def activate(self) -> None:
        """Called when the mode becomes the active one."""
        self.sync_current()

    def sync_current(self) -> None:
        """Push the current image path and mark to the UI state."""
        img = self.get_current()
        self.state._set_current_path(img.source if img else "")
        self.state._set_current_marked(bool(img and img.marked))

    @abstractmethod
    def handle_action(self, action: Action) -> bool:
        """Handle a mode-specific action; return False if it is not ours."""
