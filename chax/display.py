"""Monochrome 64x32 framebuffer used as the CHIP-8 display collaborator."""

from typing import Callable, Optional, Sequence

import jax.numpy as jnp
import numpy as np

from chax.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from chax.rendering import color_scheme, frame_to_rgb


class Display:
    """XOR-composited framebuffer with wraparound.

    `present()` renders the framebuffer to RGB and passes the frame to
    `sink`, which is how a host puts pixels on screen.
    """

    def __init__(
        self,
        scale: int = 1,
        scheme: str = "classic",
        sink: Optional[Callable[[np.ndarray], None]] = None,
    ):
        self.scale = scale
        self.on_color, self.off_color = color_scheme(scheme)
        self.sink = sink
        self.pixels = jnp.zeros((SCREEN_WIDTH, SCREEN_HEIGHT), dtype=jnp.bool_)

    def clear(self) -> None:
        self.pixels = jnp.zeros_like(self.pixels)

    def draw(self, x: int, y: int, sprite: Sequence[int]) -> bool:
        """XOR `sprite` onto the framebuffer with its top-left corner at (x, y).

        Each byte is one row of 8 pixels, most significant bit leftmost.
        Pixels past the right or bottom edge wrap around to the opposite side.

        Returns:
            True if any lit pixel was turned off.
        """
        if not len(sprite):
            return False

        rows = jnp.array([int(b) & 0xFF for b in sprite], dtype=jnp.uint8)
        # (rows, 8) bit matrix -> (8, rows) to match [x, y] indexing
        sprite_mask = jnp.unpackbits(rows[:, None], axis=1).T.astype(jnp.bool_)

        xs = (int(x) + jnp.arange(8)) % SCREEN_WIDTH
        ys = (int(y) + jnp.arange(len(rows))) % SCREEN_HEIGHT
        cols, lines = xs[:, None], ys[None, :]

        current = self.pixels[cols, lines]
        collision = bool(jnp.any(current & sprite_mask))
        self.pixels = self.pixels.at[cols, lines].set(current ^ sprite_mask)
        return collision

    def pixel(self, x: int, y: int) -> bool:
        return bool(self.pixels[x % SCREEN_WIDTH, y % SCREEN_HEIGHT])

    def present(self) -> np.ndarray:
        """Render the framebuffer and flush it to the sink, if any."""
        frame = frame_to_rgb(self.pixels, self.scale, self.on_color, self.off_color)
        if self.sink is not None:
            self.sink(frame)
        return frame
