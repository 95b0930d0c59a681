"""Viewer mode: one image at a time, file navigation."""

from __future__ import annotations

from viewer_actions.actions import Action, ActionType
from viewer_actions.infra.logger import get_logger
from viewer_actions.modes.base import Mode

_logger = get_logger("viewer_mode")


class ViewerMode(Mode):
    name = "viewer"

    def handle_action(self, action: Action) -> bool:
        last = len(self.images) - 1
        if action.type is ActionType.FIRST_FILE:
            target = 0
        elif action.type is ActionType.LAST_FILE:
            target = last
        elif action.type is ActionType.PREV_FILE:
            target = self.images.current_index - 1
        elif action.type is ActionType.NEXT_FILE:
            target = self.images.current_index + 1
        else:
            return False

        if self.images.set_current(target):
            _logger.debug("%s -> %d", action.typename, self.images.current_index)
            self.sync_current()
            self.state.request_redraw()
        return True
