from __future__ import annotations

from viewer_actions.app.state.viewer_state import ViewerState
from viewer_actions.infra.logger import get_logger

_logger = get_logger("status")

MAX_STATUS_LEN = 60
ELLIPSIS = "..."


def truncate_status(message: str) -> str:
    """Limit `message` to MAX_STATUS_LEN characters, ending in an ellipsis if cut."""
    text = str(message)
    if len(text) <= MAX_STATUS_LEN:
        return text
    return text[: MAX_STATUS_LEN - len(ELLIPSIS)] + ELLIPSIS


class StatusReporter:
    def __init__(self, state: ViewerState) -> None:
        self._state = state

    def report(self, message: str) -> None:
        text = truncate_status(message)
        _logger.debug("status: %s", text)
        self._state._set_status_text(text)
        self._state.request_redraw()
