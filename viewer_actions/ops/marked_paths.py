from __future__ import annotations

from collections.abc import Iterable

from viewer_actions.image_list import Image


def collect_marked_paths(images: Iterable[Image]) -> list[str]:
    """Sources of all marked images, in collection order.

    An empty list means nothing is marked; that is not an error.
    """
    return [img.source for img in images if img.marked]
