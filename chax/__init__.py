"""CHIP-8 interpreter package."""

from chax.constants import *
from chax.errors import (
    Chip8Error, MemoryAccessError, StackOverflowError, StackUnderflowError, ProgramLoadError,
)
from chax.display import Display
from chax.keypad import Keypad
from chax.state import EmulatorState, StackState, create_state
from chax.decode import DecodedInstruction, decode
from chax.emulator import execute, fetch, step, tick_timers, load_program, load_rom, read_rom
from chax.config import InterpreterConfig
from chax.timing import CycleClock
from chax.interpreter import Interpreter
from chax.rendering import frame_to_rgb, color_scheme
from chax.logging import get_logger, set_log_level

__all__ = [
    "Interpreter",
    "InterpreterConfig",
    "CycleClock",
    "EmulatorState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "tick_timers",
    "load_program",
    "load_rom",
    "read_rom",
    "DecodedInstruction",
    "decode",
    "Display",
    "Keypad",
    "Chip8Error",
    "MemoryAccessError",
    "StackOverflowError",
    "StackUnderflowError",
    "ProgramLoadError",
    "PROGRAM_START",
    "FONT_START",
    "MEMORY_SIZE",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "frame_to_rgb",
    "color_scheme",
    "get_logger",
    "set_log_level",
]
