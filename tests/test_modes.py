from __future__ import annotations

from pathlib import Path

from viewer_actions.actions import Action, ActionType
from viewer_actions.app.state.viewer_state import ViewerState
from viewer_actions.image_list import ImageList
from viewer_actions.modes import GalleryMode, ViewerMode, parse_keybinds


def _images(tmp_path: Path, count: int) -> ImageList:
    return ImageList(str(tmp_path / f"{i:02d}.jpg") for i in range(count))


def test_viewer_navigation_updates_current_path(tmp_path: Path) -> None:
    images = _images(tmp_path, 3)
    state = ViewerState()
    mode = ViewerMode(images, state)
    mode.activate()
    assert state.currentPath == images[0].source

    assert mode.handle_action(Action(ActionType.NEXT_FILE)) is True
    assert images.current_index == 1
    assert state.currentPath == images[1].source

    mode.handle_action(Action(ActionType.LAST_FILE))
    assert images.current_index == 2

    mode.handle_action(Action(ActionType.NEXT_FILE))
    assert images.current_index == 2

    mode.handle_action(Action(ActionType.PREV_FILE))
    assert images.current_index == 1

    mode.handle_action(Action(ActionType.FIRST_FILE))
    assert images.current_index == 0
    assert mode.get_current() is images[0]


def test_viewer_navigation_redraws_only_on_change(tmp_path: Path) -> None:
    images = _images(tmp_path, 2)
    state = ViewerState()
    redraws: list[None] = []
    state.redrawRequested.connect(lambda: redraws.append(None))
    mode = ViewerMode(images, state)

    mode.handle_action(Action(ActionType.PREV_FILE))
    assert redraws == []
    mode.handle_action(Action(ActionType.NEXT_FILE))
    assert len(redraws) == 1


def test_viewer_mark_indicator_follows_current(tmp_path: Path) -> None:
    images = _images(tmp_path, 2)
    images.toggle_marked(images[1])
    state = ViewerState()
    mode = ViewerMode(images, state)

    mode.handle_action(Action(ActionType.NEXT_FILE))

    assert state.currentMarked is True


def test_viewer_rejects_gallery_actions(tmp_path: Path) -> None:
    mode = ViewerMode(_images(tmp_path, 2), ViewerState())
    assert mode.handle_action(Action(ActionType.STEP_DOWN)) is False


def test_gallery_steps_over_grid(tmp_path: Path) -> None:
    images = _images(tmp_path, 10)
    mode = GalleryMode(images, ViewerState(), columns=4)

    mode.handle_action(Action(ActionType.STEP_DOWN))
    assert images.current_index == 4
    mode.handle_action(Action(ActionType.STEP_RIGHT))
    assert images.current_index == 5
    mode.handle_action(Action(ActionType.STEP_DOWN))
    assert images.current_index == 9
    # last row is short: stepping down past the end stays put
    assert mode.handle_action(Action(ActionType.STEP_DOWN)) is True
    assert images.current_index == 9
    mode.handle_action(Action(ActionType.STEP_UP))
    assert images.current_index == 5
    mode.handle_action(Action(ActionType.STEP_LEFT))
    assert images.current_index == 4


def test_gallery_rejects_viewer_actions(tmp_path: Path) -> None:
    mode = GalleryMode(_images(tmp_path, 2), ViewerState())
    assert mode.handle_action(Action(ActionType.NEXT_FILE)) is False


def test_parse_keybinds_skips_invalid_entries() -> None:
    binds = parse_keybinds({"q": "exit", "z": "zoom 2", "e": "exec echo {}"})

    assert [str(b) for b in binds] == ["q: exit", "e: exec echo {}"]


def test_find_keybind(tmp_path: Path) -> None:
    mode = ViewerMode(_images(tmp_path, 1), ViewerState(), parse_keybinds({"Right": "next_file"}))
    assert mode.find_keybind("Right") == Action(ActionType.NEXT_FILE)
    assert mode.find_keybind("Left") is None
