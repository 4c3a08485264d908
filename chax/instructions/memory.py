"""CHIP-8 register load and arithmetic immediates."""

import jax
import jax.numpy as jnp

from chax.state import EmulatorState, as_index, register, set_register, next_instruction
from chax.decode import DecodedInstruction


def execute_set(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """6XNN - Set VX = NN."""
    return next_instruction(set_register(state, instruction.x, instruction.nn))


def execute_add(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """7XNN - Add NN to VX. Wraps, VF untouched."""
    total = register(state, instruction.x) + instruction.nn
    return next_instruction(set_register(state, instruction.x, total))


def execute_set_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return next_instruction(state.replace(I=as_index(instruction.nnn)))


def execute_random(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """CXNN - Set VX = random byte & NN."""
    key, subkey = jax.random.split(state.rng)
    random_byte = int(jax.random.bits(subkey, dtype=jnp.uint8))
    state = set_register(state, instruction.x, random_byte & instruction.nn)
    return next_instruction(state.replace(rng=key))
