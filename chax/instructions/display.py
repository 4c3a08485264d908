"""CHIP-8 display operations."""

from chax.state import EmulatorState, register, set_flag, next_instruction
from chax.decode import DecodedInstruction
from chax.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from chax.memory import read_bytes


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw N sprite rows from memory[I] at (VX, VY); VF = collision."""
    sprite = read_bytes(state.memory, int(state.I), instruction.n, f"draw sprite {instruction}")
    sprite_x = register(state, instruction.x) % SCREEN_WIDTH
    sprite_y = register(state, instruction.y) % SCREEN_HEIGHT

    collision = state.display.draw(sprite_x, sprite_y, sprite)
    return next_instruction(set_flag(state, int(collision)))
