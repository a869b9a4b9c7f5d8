"""Image rendering of a simulation state.

The map is composed as a ``(H, W, 3)`` uint8 array (one pixel per cell, rows
from ``y=0`` to the floor row) and converted to a Pillow image, upscaled with
nearest-neighbour resampling. Rock and settled sand get different colors, so a
finished run shows the pile on top of the scan.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from sandfall.config import DEFAULT_FLOOR_OFFSET
from sandfall.state import State

DEFAULT_SCALE = 4

RGB = Tuple[int, int, int]
UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class Palette:
    background: RGB = (20, 20, 28)
    rock: RGB = (110, 110, 120)
    sand: RGB = (230, 190, 90)
    source: RGB = (240, 60, 60)
    floor: RGB = (70, 70, 80)


DEFAULT_PALETTE = Palette()


def state_to_array(state: State, palette: Palette = DEFAULT_PALETTE) -> UInt8Array:
    """
    Compose a (H, W, 3) uint8 array of the state's map.

    Rows run from y=0 to the floor row inclusive; columns span one cell beyond
    the outermost obstacle on each side (and always include the source).
    """
    floor = state.floor
    if floor is None:
        floor = state.lowest_rock + DEFAULT_FLOOR_OFFSET
    xs = [pos.x for pos in state.obstacles] + [state.source.x]
    left, right = min(xs) - 1, max(xs) + 1

    height, width = floor + 1, right - left + 1
    arr: UInt8Array = np.empty((height, width, 3), dtype=np.uint8)
    arr[:, :] = palette.background
    arr[floor, :] = palette.floor

    for pos in state.obstacles:
        if pos.y < floor:
            color = palette.rock if pos in state.rock else palette.sand
            arr[pos.y, pos.x - left] = color
    if state.source not in state.obstacles and 0 <= state.source.y < floor:
        arr[state.source.y, state.source.x - left] = palette.source
    return arr


def render_image(
    state: State, scale: int = DEFAULT_SCALE, palette: Palette = DEFAULT_PALETTE
) -> Image.Image:
    """
    Render ``state`` to a Pillow RGB image with each cell ``scale`` pixels wide.
    """
    if scale < 1:
        raise ValueError(f"scale must be positive, got {scale}")
    arr = state_to_array(state, palette)
    img = Image.fromarray(arr)
    if scale > 1:
        img = img.resize(
            (img.width * scale, img.height * scale), Image.Resampling.NEAREST
        )
    return img
