"""Bounds-checked access to CHIP-8 memory."""

from typing import Sequence

import jax.numpy as jnp

from chax.constants import MEMORY_SIZE
from chax.errors import MemoryAccessError


def check_range(address: int, length: int, operation: str) -> None:
    """Raise MemoryAccessError unless [address, address + length) fits in memory."""
    if address < 0 or length < 0 or address + length > MEMORY_SIZE:
        raise MemoryAccessError(address, operation, length)


def read_bytes(memory: jnp.ndarray, address: int, length: int, operation: str = "read") -> list[int]:
    """Read `length` bytes starting at `address`."""
    check_range(address, length, operation)
    return [int(b) for b in memory[address:address + length]]


def write_bytes(memory: jnp.ndarray, address: int, data: Sequence[int], operation: str = "write") -> jnp.ndarray:
    """Return a copy of memory with `data` written at `address`."""
    check_range(address, len(data), operation)
    if not len(data):
        return memory
    values = jnp.array([int(b) & 0xFF for b in data], dtype=jnp.uint8)
    return memory.at[address:address + len(data)].set(values)


def read_word(memory: jnp.ndarray, address: int, operation: str = "fetch") -> int:
    """Read a big-endian 16-bit word."""
    high, low = read_bytes(memory, address, 2, operation)
    return (high << 8) | low
