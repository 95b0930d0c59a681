from __future__ import annotations

from collections.abc import Iterable

from PySide6.QtCore import Property, QObject, Signal, Slot

from viewer_actions.actions import Action
from viewer_actions.app.context import AppContext
from viewer_actions.app.dispatcher import ActionDispatcher
from viewer_actions.app.state.viewer_state import ViewerState
from viewer_actions.app.status import StatusReporter
from viewer_actions.image_list import ImageList
from viewer_actions.infra.logger import get_logger
from viewer_actions.infra.settings_manager import SettingsManager
from viewer_actions.modes import GalleryMode, Mode, ViewerMode, parse_keybinds
from viewer_actions.ops.command_runner import CommandRunner

_logger = get_logger("backend")


class Backend(QObject):
    """Application facade.

    UI → Python: backend.dispatch(text) / backend.handleKey(key)
    Python → UI: backend.viewer state properties and redrawRequested,
    backend.exitRequested(code)
    """

    exitRequested = Signal(int)

    def __init__(
        self,
        sources: Iterable[str] = (),
        settings: SettingsManager | None = None,
        runner: CommandRunner | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)

        self._settings_mgr = settings or SettingsManager()
        self._viewer = ViewerState(self)
        self._images = ImageList(sources)
        self._exit_code: int | None = None

        runner = runner or CommandRunner(
            timeout=self._settings_mgr.exec_timeout,
            shell=self._settings_mgr.shell,
        )
        self._ctx = AppContext(
            images=self._images,
            state=self._viewer,
            app=self,
            runner=runner,
            reporter=StatusReporter(self._viewer),
        )
        self._dispatcher = ActionDispatcher(self._ctx)

        self._modes: dict[str, Mode] = {}
        self._register_modes()

        if not self._viewer._switch_info(str(self._settings_mgr.get("info_scheme") or "")):
            _logger.warning("invalid info_scheme setting: %r", self._settings_mgr.get("info_scheme"))

        start = self._settings_mgr.start_mode
        if start not in self._modes:
            _logger.warning("unknown start_mode %r, using viewer", start)
            start = ViewerMode.name
        self._mode: Mode = self._modes[start]
        self._activate(self._mode)

    def _register_modes(self) -> None:
        sm = self._settings_mgr
        self._modes[ViewerMode.name] = ViewerMode(
            self._images,
            self._viewer,
            parse_keybinds(sm.keybindings(ViewerMode.name)),
        )
        self._modes[GalleryMode.name] = GalleryMode(
            self._images,
            self._viewer,
            parse_keybinds(sm.keybindings(GalleryMode.name)),
            columns=sm.gallery_columns,
        )

    # ---- expose state ----
    def _get_viewer(self) -> QObject:
        return self._viewer

    viewer = Property(QObject, _get_viewer, constant=True)  # type: ignore[arg-type]

    @property
    def images(self) -> ImageList:
        return self._images

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def context(self) -> AppContext:
        return self._ctx

    @property
    def exit_code(self) -> int | None:
        """Code requested by the exit action, None while still running."""
        return self._exit_code

    # ---- command entry ----
    @Slot(str)
    def dispatch(self, text: str) -> None:
        try:
            action = Action.parse(text)
        except ValueError as e:
            _logger.warning("bad action %r: %s", text, e)
            self._ctx.reporter.report(f"Invalid action: {e}")
            return
        self.dispatch_action(action)

    def dispatch_action(self, action: Action) -> None:
        self._dispatcher.dispatch(self._mode, action)

    @Slot(str, result=bool)
    def handleKey(self, key: str) -> bool:
        action = self._mode.find_keybind(str(key))
        if action is None:
            _logger.debug("no binding for key %s in %s", key, self._mode.name)
            return False
        self.dispatch_action(action)
        return True

    # ---- application services used by the dispatcher ----
    def switch_mode(self, name: str) -> None:
        target = self._modes.get(str(name).strip())
        if target is None:
            _logger.warning("unknown mode: %s", name)
            self._ctx.reporter.report(f"Unknown mode: {name}")
            return
        self._mode = target
        self._activate(target)
        self._viewer.request_redraw()

    def exit(self, code: int) -> None:
        _logger.info("exit requested: %d", code)
        self._exit_code = int(code)
        self.exitRequested.emit(self._exit_code)

    def _activate(self, mode: Mode) -> None:
        _logger.debug("mode: %s", mode.name)
        self._viewer._set_mode_name(mode.name)
        mode.activate()
