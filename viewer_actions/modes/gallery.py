"""Gallery mode: thumbnail grid, selection moves in two dimensions."""

from __future__ import annotations

from viewer_actions.actions import Action, ActionType
from viewer_actions.app.state.viewer_state import ViewerState
from viewer_actions.image_list import ImageList
from viewer_actions.modes.base import Keybind, Mode


class GalleryMode(Mode):
    name = "gallery"

    def __init__(
        self,
        images: ImageList,
        state: ViewerState,
        keybinds: list[Keybind] | None = None,
        columns: int = 4,
    ) -> None:
        super().__init__(images, state, keybinds)
        self.columns = max(1, int(columns))

    def handle_action(self, action: Action) -> bool:
        steps = {
            ActionType.STEP_LEFT: -1,
            ActionType.STEP_RIGHT: 1,
            ActionType.STEP_UP: -self.columns,
            ActionType.STEP_DOWN: self.columns,
        }
        step = steps.get(action.type)
        if step is None:
            return False

        target = self.images.current_index + step
        # Steps past the grid edge keep the selection where it is.
        if 0 <= target < len(self.images) and self.images.set_current(target):
            self.sync_current()
            self.state.request_redraw()
        return True
