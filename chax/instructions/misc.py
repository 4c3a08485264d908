"""CHIP-8 miscellaneous instructions (Fxxx)."""

from chax.state import (
    EmulatorState, NOT_WAITING, as_u8, as_index, register, set_register, next_instruction,
)
from chax.decode import DecodedInstruction
from chax.constants import FONT_START, FONT_SPRITE_SIZE
from chax.memory import read_bytes, write_bytes
from chax.instructions.system import execute_unknown


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return next_instruction(set_register(state, instruction.x, int(state.delay_timer)))


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX0A - Wait for key press.

    Without a pressed key PC stays put, so the same instruction runs again on
    the next cycle. `awaiting_key` records the register being waited on.
    """
    pressed_key = state.keypad.first_pressed()
    if pressed_key is None:
        return state.replace(awaiting_key=instruction.x)
    state = set_register(state, instruction.x, pressed_key)
    return next_instruction(state.replace(awaiting_key=NOT_WAITING))


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return next_instruction(state.replace(delay_timer=as_u8(register(state, instruction.x))))


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return next_instruction(state.replace(sound_timer=as_u8(register(state, instruction.x))))


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX1E - Add VX to I. No flag is written."""
    return next_instruction(state.replace(I=as_index(int(state.I) + register(state, instruction.x))))


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX29 - Set I to the font sprite for the hex digit in VX."""
    digit = register(state, instruction.x) & 0xF
    return next_instruction(state.replace(I=as_index(FONT_START + digit * FONT_SPRITE_SIZE)))


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = register(state, instruction.x)
    digits = [value // 100, (value // 10) % 10, value % 10]
    memory = write_bytes(state.memory, int(state.I), digits, f"store BCD {instruction}")
    return next_instruction(state.replace(memory=memory))


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I; I += X + 1."""
    count = instruction.x + 1
    values = [int(v) for v in state.V[:count]]
    memory = write_bytes(state.memory, int(state.I), values, f"store registers {instruction}")
    return next_instruction(state.replace(memory=memory, I=as_index(int(state.I) + count)))


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I; I += X + 1."""
    count = instruction.x + 1
    values = read_bytes(state.memory, int(state.I), count, f"load registers {instruction}")
    for index, value in enumerate(values):
        state = set_register(state, index, value)
    return next_instruction(state.replace(I=as_index(int(state.I) + count)))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Dispatch FXNN instructions on the low byte."""
    handler = MISC_INSTRUCTIONS.get(instruction.nn, execute_unknown)
    return handler(state, instruction)
