"""Sixteen-key hexadecimal keypad collaborator."""

from typing import Optional

import jax.numpy as jnp

from chax.constants import NUM_KEYS


class Keypad:
    """Pressed/released state for keys 0x0-0xF."""

    def __init__(self):
        self.keys = jnp.zeros(NUM_KEYS, dtype=jnp.bool_)

    @staticmethod
    def _check_key(key: int) -> int:
        key = int(key)
        if not 0 <= key < NUM_KEYS:
            raise ValueError(f"Key must be in 0x0-0xF, got {key}")
        return key

    def set_key_state(self, key: int, pressed: bool) -> None:
        self.keys = self.keys.at[self._check_key(key)].set(bool(pressed))

    def is_pressed(self, key: int) -> bool:
        return bool(self.keys[self._check_key(key)])

    def first_pressed(self) -> Optional[int]:
        """Lowest-numbered pressed key, or None when nothing is held."""
        if not bool(jnp.any(self.keys)):
            return None
        return int(jnp.argmax(self.keys))

    def release_all(self) -> None:
        self.keys = jnp.zeros_like(self.keys)
