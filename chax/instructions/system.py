"""CHIP-8 system instructions (0x0xxx) and the unknown-opcode fallback."""

from chax.state import EmulatorState, as_u16, next_instruction
from chax.decode import DecodedInstruction
from chax.stack import pop
from chax.logging import get_logger


def execute_unknown(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Report an unrecognised opcode and continue with the next instruction."""
    get_logger().log_unknown_opcode(instruction.raw, int(state.pc))
    return next_instruction(state)


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00E0 - Clear display."""
    state.display.clear()
    return next_instruction(state)


def execute_return(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """00EE - Return from subroutine to the instruction after the call."""
    stack, address = pop(state.stack, int(state.pc))
    return next_instruction(state.replace(stack=stack, pc=as_u16(address)))


def execute_system_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Dispatch on the low nibble: 0 clears the display, E returns."""
    if instruction.n == 0x0:
        return execute_clear_screen(state, instruction)
    if instruction.n == 0xE:
        return execute_return(state, instruction)
    return execute_unknown(state, instruction)
