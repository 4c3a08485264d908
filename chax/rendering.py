"""Framebuffer to RGB conversion for presenting the CHIP-8 display."""

from typing import Tuple

import numpy as np

Color = Tuple[int, int, int]

COLOR_SCHEMES = {
    "classic": ((255, 255, 255), (0, 0, 0)),  # White on black
    "phosphor": ((0, 255, 0), (0, 0, 0)),  # Green on black
    "amber": ((255, 176, 0), (0, 0, 0)),
    "grey": ((255, 255, 255), (64, 64, 64)),
    "blue": ((0, 255, 255), (0, 0, 64)),
}


def color_scheme(name: str = "classic") -> Tuple[Color, Color]:
    """Look up an (on_color, off_color) pair by name.

    Raises:
        ValueError: if the scheme is not one of COLOR_SCHEMES.
    """
    if name not in COLOR_SCHEMES:
        raise ValueError(
            f"Unknown color scheme '{name}'. Available: {sorted(COLOR_SCHEMES)}"
        )
    return COLOR_SCHEMES[name]


def frame_to_rgb(
    pixels,
    scale: int = 1,
    on_color: Color = (255, 255, 255),
    off_color: Color = (0, 0, 0),
) -> np.ndarray:
    """Convert a (width, height) boolean framebuffer into an RGB image.

    Args:
        pixels: Boolean array of shape (64, 32), indexed [x, y]
        scale: Integer upscaling factor (nearest neighbour)
        on_color: RGB color for lit pixels
        off_color: RGB color for unlit pixels

    Returns:
        uint8 array of shape (height * scale, width * scale, 3)
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    # (width, height) -> row-major (height, width)
    lit = np.asarray(pixels, dtype=np.bool_).T

    frame = np.empty((*lit.shape, 3), dtype=np.uint8)
    frame[lit] = on_color
    frame[~lit] = off_color

    if scale > 1:
        frame = np.repeat(np.repeat(frame, scale, axis=0), scale, axis=1)
    return frame
