from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from viewer_actions.app.state.viewer_state import ViewerState
from viewer_actions.app.status import StatusReporter
from viewer_actions.image_list import ImageList
from viewer_actions.ops.command_runner import CommandRunner


class Application(Protocol):
    def switch_mode(self, name: str) -> None: ...

    def exit(self, code: int) -> None: ...


@dataclass
class AppContext:
    """Everything the dispatcher touches, passed in explicitly."""

    images: ImageList
    state: ViewerState
    app: Application
    runner: CommandRunner
    reporter: StatusReporter
