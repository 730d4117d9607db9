"""Animated GIFs of Lissajous figures."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import BinaryIO

from PIL import Image

__all__ = [
    "render_frames",
    "lissajous",
    "green_on_black",
    "write_color_series",
    "GREEN_ON_BLACK",
    "FOUR_COLORS",
    "BLACK_INDEX",
    "RED_INDEX",
    "GREEN_INDEX",
    "BLUE_INDEX",
    "DEFAULT_CYCLES",
    "RESOLUTION",
    "SIZE",
    "FRAMES",
    "DELAY_MS",
]

DEFAULT_CYCLES = 5  # complete revolutions of the x oscillator
RESOLUTION = 0.001  # angular resolution
SIZE = 100  # the canvas covers [-SIZE..+SIZE]
FRAMES = 64  # animation frames
DELAY_MS = 80  # delay between frames
_PHASE_STEP = 0.1

Palette = Sequence[tuple[int, int, int]]

GREEN_ON_BLACK: Palette = ((0x00, 0x00, 0x00), (0x00, 0xFF, 0x00))
FOUR_COLORS: Palette = (
    (0x00, 0x00, 0x00),
    (0xFF, 0x00, 0x00),
    (0x00, 0xFF, 0x00),
    (0x00, 0x00, 0xFF),
)

BLACK_INDEX = 0
RED_INDEX = 1
GREEN_INDEX = 2
BLUE_INDEX = 3


def _angles(cycles: float) -> Iterator[float]:
    limit = cycles * 2 * math.pi
    t = 0.0
    while t < limit:
        yield t
        t += RESOLUTION


def _coordinate(value: float) -> int:
    return SIZE + int(value * SIZE + 0.5)


def render_frames(
    cycles: float = DEFAULT_CYCLES,
    color_index: int = 1,
    palette: Palette = GREEN_ON_BLACK,
    freq: float | None = None,
) -> list[Image.Image]:
    """Draw the animation frames as palette images.

    freq is the relative frequency of the y oscillator; a random value in
    [0, 3) is used when it is not given.
    """
    if not 1 <= len(palette) <= 256:
        raise ValueError(f"palette must hold 1 to 256 colours, got {len(palette)}")
    if not 0 <= color_index < len(palette):
        raise ValueError(f"colour index {color_index} outside palette of {len(palette)}")
    if freq is None:
        freq = random.random() * 3.0

    angles = list(_angles(cycles))
    xs = [_coordinate(math.sin(t)) for t in angles]
    width = 2 * SIZE + 1
    flat_palette = [channel for rgb in palette for channel in rgb]

    frames = []
    phase = 0.0
    for _ in range(FRAMES):
        pixels = bytearray(width * width)
        for t, x in zip(angles, xs):
            y = _coordinate(math.sin(t * freq + phase))
            if 0 <= x < width and 0 <= y < width:
                pixels[y * width + x] = color_index
        frame = Image.frombytes("P", (width, width), bytes(pixels))
        frame.putpalette(flat_palette)
        frames.append(frame)
        phase += _PHASE_STEP
    return frames


def lissajous(
    out: BinaryIO,
    cycles: float = DEFAULT_CYCLES,
    color_index: int = 1,
    palette: Palette = GREEN_ON_BLACK,
    freq: float | None = None,
) -> None:
    """Write an animated GIF of a Lissajous figure to out."""
    first, *rest = render_frames(cycles, color_index, palette, freq)
    first.save(
        out,
        format="GIF",
        save_all=True,
        append_images=rest,
        duration=DELAY_MS,
        loop=FRAMES,
        optimize=False,
    )


def green_on_black(out: BinaryIO) -> None:
    """Write the figure in green on a black background."""
    lissajous(out, DEFAULT_CYCLES, 1, GREEN_ON_BLACK)


def write_color_series(directory: str | Path = ".") -> list[Path]:
    """Write file_1.gif, file_2.gif and file_3.gif in red, green and blue."""
    base = Path(directory)
    paths = []
    for number, index in enumerate((RED_INDEX, GREEN_INDEX, BLUE_INDEX), start=1):
        path = base / f"file_{number}.gif"
        with path.open("wb") as handle:
            lissajous(handle, DEFAULT_CYCLES, index, FOUR_COLORS)
        paths.append(path)
    return paths