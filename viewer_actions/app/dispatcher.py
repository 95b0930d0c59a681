from __future__ import annotations

from collections.abc import Sequence

from viewer_actions.actions import Action, ActionType
from viewer_actions.app.context import AppContext
from viewer_actions.infra.logger import get_logger
from viewer_actions.modes.base import Mode
from viewer_actions.ops.marked_paths import collect_marked_paths

_logger = get_logger("dispatcher")


class ActionDispatcher:
    """Route one action to a built-in handler or to the active mode.

    Every outcome surfaces through the UI state (status text, overlays,
    redraw requests); nothing is returned and nothing is raised for failed
    commands or unknown actions.
    """

    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx

    def dispatch(self, mode: Mode, action: Action) -> None:  # noqa: PLR0911, PLR0912
        state = self.ctx.state
        _logger.debug("dispatch: %s (mode=%s)", action, mode.name)

        if action.type is ActionType.INFO:
            if not state._switch_info(action.params or ""):
                _logger.warning("unknown info scheme: %s", action.params)
            state.request_redraw()
            return

        if action.type is ActionType.STATUS:
            state._set_status_text(action.params or "")
            state.request_redraw()
            return

        if action.type is ActionType.FULLSCREEN:
            state._toggle_fullscreen()
            return

        if action.type is ActionType.MODE:
            self.ctx.app.switch_mode(action.params or "")
            return

        if action.type is ActionType.EXEC:
            current = mode.get_current()
            if current is None:
                _logger.debug("exec ignored: no current image")
                return
            self._execute(action.params or "", [current.source])
            return

        if action.type is ActionType.MARK:
            current = mode.get_current()
            if current is None:
                _logger.debug("mark ignored: no current image")
                return
            state._set_current_marked(self.ctx.images.toggle_marked(current))
            state.request_redraw()
            return

        if action.type is ActionType.EXEC_MARKED:
            paths = collect_marked_paths(self.ctx.images)
            if not paths:
                _logger.debug("exec_marked ignored: nothing marked")
                return
            self._execute(action.params or "", paths)
            return

        if action.type is ActionType.HELP:
            if state._get_help_visible():
                state._hide_help()
            else:
                state._show_help([str(bind) for bind in mode.get_keybinds()])
            state.request_redraw()
            return

        if action.type is ActionType.EXIT:
            if state._get_help_visible():
                state._hide_help()
                state.request_redraw()
            else:
                self.ctx.app.exit(0)
            return

        if not mode.handle_action(action):
            self.ctx.reporter.report(f"Unhandled action: {action.typename}")

    def _execute(self, expression: str, paths: Sequence[str]) -> None:
        outcome = self.ctx.runner.run(expression, paths)
        _logger.debug("exec outcome: %s", outcome.kind.value)
        self.ctx.reporter.report(outcome.message)
