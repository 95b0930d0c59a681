"""Action dispatch and external command execution for an image viewer."""

from .actions import Action, ActionType

__all__ = ["Action", "ActionType"]
