"""CHIP-8 emulator state structures."""

from typing import Optional

import jax
import jax.numpy as jnp
from flax.struct import PyTreeNode, field

from chax.constants import (
    PROGRAM_START, FONT_START, FONT_DATA, MEMORY_SIZE, NUM_REGISTERS, STACK_SIZE,
    FLAG_REGISTER, INSTRUCTION_SIZE, BYTE_MASK, WORD_MASK,
)
from chax.display import Display
from chax.keypad import Keypad

NOT_WAITING = -1


class StackState(PyTreeNode):
    """Return-address stack for subroutine calls."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0


class EmulatorState(PyTreeNode):
    """Architectural state of a CHIP-8 machine.

    The display and keypad are mutable collaborators carried as static fields;
    everything else is replaced, never mutated in place.
    """
    rng: jax.Array
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.astype(PROGRAM_START, jnp.uint32))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.astype(PROGRAM_START, jnp.uint16))
    opcode: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    stack: StackState = StackState()
    delay_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    sound_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    awaiting_key: int = NOT_WAITING
    display: Optional[Display] = field(pytree_node=False, default=None)
    keypad: Optional[Keypad] = field(pytree_node=False, default=None)


def as_u8(value: int) -> jnp.ndarray:
    """Wrap an integer into an 8-bit register value."""
    return jnp.asarray(int(value) & BYTE_MASK, dtype=jnp.uint8)


def as_u16(value: int) -> jnp.ndarray:
    """Wrap an integer into a 16-bit address value."""
    return jnp.asarray(int(value) & WORD_MASK, dtype=jnp.uint16)


def as_index(value: int) -> jnp.ndarray:
    """Store an index register value.

    I is kept wider than any address so that arithmetic past the top of memory
    stays out of range and faults when I is next used.
    """
    return jnp.asarray(int(value), dtype=jnp.uint32)


def register(state: EmulatorState, index: int) -> int:
    """Read register V[index] as a Python int."""
    return int(state.V[index])


def set_register(state: EmulatorState, index: int, value: int) -> EmulatorState:
    """Write V[index] with modulo-256 wraparound."""
    return state.replace(V=state.V.at[index].set(as_u8(value)))


def set_flag(state: EmulatorState, value: int) -> EmulatorState:
    return set_register(state, FLAG_REGISTER, value)


def next_instruction(state: EmulatorState) -> EmulatorState:
    """Advance PC to the following instruction."""
    return state.replace(pc=as_u16(int(state.pc) + INSTRUCTION_SIZE))


def skip_next_instruction(state: EmulatorState) -> EmulatorState:
    """Advance PC past the following instruction."""
    return state.replace(pc=as_u16(int(state.pc) + 2 * INSTRUCTION_SIZE))


def create_state(
    rng: Optional[jax.Array] = None,
    display: Optional[Display] = None,
    keypad: Optional[Keypad] = None,
) -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    if rng is None:
        rng = jax.random.PRNGKey(0)
    state = EmulatorState(
        rng,
        display=display if display is not None else Display(),
        keypad=keypad if keypad is not None else Keypad(),
    )
    font = jnp.array(FONT_DATA, dtype=jnp.uint8)
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(font))
