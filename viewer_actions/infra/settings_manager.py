from __future__ import annotations

import json
import os
from typing import Any

from .logger import get_logger

_logger = get_logger("settings")

_COMMON_KEYBINDINGS: dict[str, str] = {
    "F1": "help",
    "f": "fullscreen",
    "i": "info",
    "m": "mark",
    "e": "exec identify {}",
    "Shift+e": "exec_marked echo {}",
    "Escape": "exit",
    "q": "exit",
}


class SettingsManager:
    def __init__(self, settings_path: str | None = None):
        self.settings_path = settings_path
        self._settings: dict[str, Any] = {}
        self.load()

    DEFAULTS: dict[str, Any] = {
        "exec_timeout": 5.0,
        "shell": "/bin/sh",
        "start_mode": "viewer",
        "info_scheme": "full",
        "gallery_columns": 4,
        "keybindings": {
            "viewer": {
                **_COMMON_KEYBINDINGS,
                "Home": "first_file",
                "End": "last_file",
                "Left": "prev_file",
                "Right": "next_file",
                "Return": "mode gallery",
            },
            "gallery": {
                **_COMMON_KEYBINDINGS,
                "Left": "step_left",
                "Right": "step_right",
                "Up": "step_up",
                "Down": "step_down",
                "Return": "mode viewer",
            },
        },
    }

    def load(self) -> None:
        self._settings = {}
        if not self.settings_path:
            return
        try:
            if os.path.exists(self.settings_path):
                with open(self.settings_path, encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    self._settings = data
                    _logger.debug("settings loaded: %s", self.settings_path)
                else:
                    _logger.warning("settings ignored, not an object: %s", self.settings_path)
        except (OSError, ValueError) as e:
            _logger.warning("settings load failed: %s", e)

    def save(self) -> None:
        if not self.settings_path:
            return
        try:
            parent = os.path.dirname(self.settings_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, ensure_ascii=False, indent=2)
            _logger.debug("settings saved: %s", self.settings_path)
        except OSError as e:
            _logger.error("settings save failed: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._settings:
            return self._settings[key]
        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value
        self.save()

    @property
    def data(self) -> dict[str, Any]:
        return self._settings

    @property
    def exec_timeout(self) -> float:
        val = self.get("exec_timeout")
        try:
            timeout = float(val)
        except (TypeError, ValueError):
            timeout = 0.0
        if timeout > 0:
            return timeout
        _logger.warning("invalid exec_timeout %r, using default", val)
        return float(self.DEFAULTS["exec_timeout"])

    @property
    def shell(self) -> str:
        val = self.get("shell")
        return val if isinstance(val, str) and val.strip() else str(self.DEFAULTS["shell"])

    @property
    def start_mode(self) -> str:
        val = self.get("start_mode")
        return val if isinstance(val, str) and val else str(self.DEFAULTS["start_mode"])

    @property
    def gallery_columns(self) -> int:
        try:
            return max(1, int(self.get("gallery_columns")))
        except (TypeError, ValueError):
            return int(self.DEFAULTS["gallery_columns"])

    def keybindings(self, mode: str) -> dict[str, str]:
        """Key -> action text table for `mode`.

        User tables replace the built-in table of the same mode entirely.
        """
        tables = self.get("keybindings")
        table = tables.get(mode) if isinstance(tables, dict) else None
        if not isinstance(table, dict):
            table = self.DEFAULTS["keybindings"].get(mode, {})
        return {str(k): str(v) for k, v in table.items()}
