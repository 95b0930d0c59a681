from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .infra.logger import get_logger
from .infra.path_utils import abs_path_str

_logger = get_logger("image_list")


@dataclass(eq=False)
class Image:
    source: str
    marked: bool = False


class ImageList:
    """Ordered image collection with a current position.

    Iteration order is the order the sources were added in.
    """

    def __init__(self, sources: Iterable[str] = ()) -> None:
        self._images: list[Image] = []
        self._current_index = -1
        for src in sources:
            self.add(src)

    def add(self, source: str) -> Image:
        img = Image(abs_path_str(source))
        self._images.append(img)
        if self._current_index < 0:
            self._current_index = 0
        return img

    def __iter__(self) -> Iterator[Image]:
        return iter(self._images)

    def __len__(self) -> int:
        return len(self._images)

    def __getitem__(self, index: int) -> Image:
        return self._images[index]

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current(self) -> Image | None:
        if 0 <= self._current_index < len(self._images):
            return self._images[self._current_index]
        return None

    def set_current(self, index: int) -> bool:
        """Move the current position, clamped to the list bounds.

        Returns True if the position changed.
        """
        if not self._images:
            return False
        idx = max(0, min(int(index), len(self._images) - 1))
        if idx == self._current_index:
            return False
        _logger.debug("current: %s -> %s", self._current_index, idx)
        self._current_index = idx
        return True

    def toggle_marked(self, image: Image) -> bool:
        """Flip the mark of `image` and return the new state."""
        image.marked = not image.marked
        return image.marked
