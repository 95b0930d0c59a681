from __future__ import annotations

from PySide6.QtCore import Property, QObject, Signal

INFO_SCHEMES = ("full", "brief", "off")


class ViewerState(QObject):
    """UI-facing state the dispatcher mutates.

    The renderer binds to the properties and repaints on `redrawRequested`.
    """

    redrawRequested = Signal()
    statusTextChanged = Signal(str)
    infoSchemeChanged = Signal(str)
    fullscreenChanged = Signal(bool)
    helpVisibleChanged = Signal(bool)
    helpLinesChanged = Signal(list)
    currentMarkedChanged = Signal(bool)
    currentPathChanged = Signal(str)
    modeNameChanged = Signal(str)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._status_text = ""
        self._info_scheme = INFO_SCHEMES[0]
        self._fullscreen = False
        self._help_visible = False
        self._help_lines: list[str] = []
        self._current_marked = False
        self._current_path = ""
        self._mode_name = ""

    # ---- read-only properties (mutate via dispatcher/backend) ----
    def _get_status_text(self) -> str:
        return str(self._status_text)

    statusText = Property(str, _get_status_text, notify=statusTextChanged)  # type: ignore[arg-type]

    def _get_info_scheme(self) -> str:
        return str(self._info_scheme)

    infoScheme = Property(str, _get_info_scheme, notify=infoSchemeChanged)  # type: ignore[arg-type]

    def _get_fullscreen(self) -> bool:
        return bool(self._fullscreen)

    fullscreen = Property(bool, _get_fullscreen, notify=fullscreenChanged)  # type: ignore[arg-type]

    def _get_help_visible(self) -> bool:
        return bool(self._help_visible)

    helpVisible = Property(bool, _get_help_visible, notify=helpVisibleChanged)  # type: ignore[arg-type]

    def _get_help_lines(self) -> list:
        return list(self._help_lines)

    helpLines = Property(list, _get_help_lines, notify=helpLinesChanged)  # type: ignore[arg-type]

    def _get_current_marked(self) -> bool:
        return bool(self._current_marked)

    currentMarked = Property(bool, _get_current_marked, notify=currentMarkedChanged)  # type: ignore[arg-type]

    def _get_current_path(self) -> str:
        return str(self._current_path)

    currentPath = Property(str, _get_current_path, notify=currentPathChanged)  # type: ignore[arg-type]

    def _get_mode_name(self) -> str:
        return str(self._mode_name)

    modeName = Property(str, _get_mode_name, notify=modeNameChanged)  # type: ignore[arg-type]

    # ---- mutation helpers ----
    def request_redraw(self) -> None:
        self.redrawRequested.emit()

    def _set_status_text(self, text: str) -> None:
        # Always notify: re-running a command should refresh the same text.
        self._status_text = str(text)
        self.statusTextChanged.emit(self._status_text)

    def _switch_info(self, scheme: str) -> bool:
        """Select an info scheme; an empty name cycles to the next one.

        Returns False for unknown scheme names.
        """
        name = str(scheme or "").strip().lower()
        if not name:
            idx = INFO_SCHEMES.index(self._info_scheme)
            name = INFO_SCHEMES[(idx + 1) % len(INFO_SCHEMES)]
        if name not in INFO_SCHEMES:
            return False
        if name != self._info_scheme:
            self._info_scheme = name
            self.infoSchemeChanged.emit(name)
        return True

    def _toggle_fullscreen(self) -> None:
        self._fullscreen = not self._fullscreen
        self.fullscreenChanged.emit(self._fullscreen)

    def _show_help(self, lines: list[str]) -> None:
        self._help_lines = list(lines)
        self.helpLinesChanged.emit(list(self._help_lines))
        if not self._help_visible:
            self._help_visible = True
            self.helpVisibleChanged.emit(True)

    def _hide_help(self) -> None:
        if not self._help_visible:
            return
        self._help_visible = False
        self.helpVisibleChanged.emit(False)

    def _set_current_marked(self, marked: bool) -> None:
        v = bool(marked)
        if v == self._current_marked:
            return
        self._current_marked = v
        self.currentMarkedChanged.emit(v)

    def _set_current_path(self, path: str) -> None:
        p = str(path)
        if p == self._current_path:
            return
        self._current_path = p
        self.currentPathChanged.emit(p)

    def _set_mode_name(self, name: str) -> None:
        n = str(name)
        if n == self._mode_name:
            return
        self._mode_name = n
        self.modeNameChanged.emit(n)
