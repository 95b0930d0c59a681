"""Application modes.

Each mode owns the mode-specific part of the action vocabulary and exposes
the current image and its keybindings to the dispatcher.
"""

from .base import Keybind, Mode, parse_keybinds
from .gallery import GalleryMode
from .viewer import ViewerMode

__all__ = ["GalleryMode", "Keybind", "Mode", "ViewerMode", "parse_keybinds"]
