"""Main CHIP-8 emulator execution engine."""

import os
from typing import Union

from chax.state import EmulatorState, as_u8, as_u16
from chax.decode import decode
from chax.constants import PROGRAM_START, MEMORY_SIZE
from chax.errors import ProgramLoadError
from chax.memory import read_word, write_bytes
from chax.instructions.system import execute_system_instruction
from chax.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset, execute_skip_if_key,
)
from chax.instructions.alu import execute_alu_operation
from chax.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chax.instructions.display import execute_display
from chax.instructions.misc import execute_misc_instruction

# Indexed by the instruction's high nibble
FAMILY_HANDLERS = [
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
]


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction.

    The handler is responsible for the program counter: it advances by 2,
    skips by 4, or overwrites PC.
    """
    decoded_instruction = decode(instruction)
    return FAMILY_HANDLERS[decoded_instruction.family](state, decoded_instruction)


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch the instruction at PC and latch it as the current opcode.

    PC is left unchanged; advancing it is part of execution.
    """
    instruction = read_word(state.memory, int(state.pc), "fetch")
    return state.replace(opcode=as_u16(instruction)), instruction


def tick_timers(state: EmulatorState) -> EmulatorState:
    """Count both timers down by one, stopping at zero."""
    delay, sound = int(state.delay_timer), int(state.sound_timer)
    return state.replace(
        delay_timer=as_u8(delay - 1) if delay > 0 else state.delay_timer,
        sound_timer=as_u8(sound - 1) if sound > 0 else state.sound_timer,
    )


def step(state: EmulatorState) -> EmulatorState:
    """Run one cycle: fetch, execute, then tick the timers."""
    state, instruction = fetch(state)
    state = execute(state, instruction)
    return tick_timers(state)


def load_program(state: EmulatorState, program: bytes) -> EmulatorState:
    """Copy program bytes into memory at 0x200 and point PC at them."""
    if PROGRAM_START + len(program) > MEMORY_SIZE:
        raise ProgramLoadError(
            f"Program of {len(program)} bytes does not fit in "
            f"{MEMORY_SIZE - PROGRAM_START} bytes available from 0x{PROGRAM_START:03X}"
        )
    memory = write_bytes(state.memory, PROGRAM_START, list(program), "load program")
    return state.replace(memory=memory, pc=as_u16(PROGRAM_START))


def read_rom(filename: Union[str, os.PathLike]) -> bytes:
    """Read a ROM image from disk."""
    try:
        with open(filename, 'rb') as f:
            rom_data = f.read()
    except OSError as e:
        raise ProgramLoadError(f"Cannot read ROM '{filename}': {e}") from e
    if not rom_data:
        raise ProgramLoadError(f"ROM '{filename}' is empty")
    return rom_data


def load_rom(state: EmulatorState, filename: Union[str, os.PathLike]) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    return load_program(state, read_rom(filename))
