"""CHIP-8 control flow instructions."""

from chax.state import (
    EmulatorState, as_u16, register, next_instruction, skip_next_instruction,
)
from chax.decode import DecodedInstruction
from chax.stack import push
from chax.instructions.system import execute_unknown


def execute_jump(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=as_u16(instruction.nnn))


def execute_call(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """2NNN - Call subroutine at NNN, saving the address of this call."""
    state = state.replace(stack=push(state.stack, int(state.pc)))
    return execute_jump(state, instruction)


def make_skip_instruction(condition_fn):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
        if condition_fn(state, instruction):
            return skip_next_instruction(state)
        return next_instruction(state)
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: register(state, inst.x) == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: register(state, inst.x) != inst.nn
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: register(state, inst.x) == register(state, inst.y)
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: register(state, inst.x) != register(state, inst.y)
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    return state.replace(pc=as_u16(instruction.nnn + register(state, 0)))


def _key_in_vx(state: EmulatorState, instruction: DecodedInstruction) -> bool:
    return state.keypad.is_pressed(register(state, instruction.x) & 0xF)


execute_skip_if_key_pressed = make_skip_instruction(
    lambda state, inst: _key_in_vx(state, inst)
)

execute_skip_if_key_not_pressed = make_skip_instruction(
    lambda state, inst: not _key_in_vx(state, inst)
)


def execute_skip_if_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """EX9E/EXA1 - Skip if key VX pressed/not pressed."""
    if instruction.nn == 0x9E:
        return execute_skip_if_key_pressed(state, instruction)
    if instruction.nn == 0xA1:
        return execute_skip_if_key_not_pressed(state, instruction)
    return execute_unknown(state, instruction)
