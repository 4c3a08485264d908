"""Stateful CHIP-8 interpreter wrapping the functional emulator core."""

from typing import Optional

import jax
import numpy as np

from chax.config import InterpreterConfig
from chax.constants import PROGRAM_START
from chax.display import Display
from chax.emulator import load_program, step
from chax.errors import Chip8Error
from chax.keypad import Keypad
from chax.logging import get_logger, set_log_level
from chax.state import EmulatorState, NOT_WAITING, create_state
from chax.timing import CycleClock


class Interpreter:
    """Owns the machine state and drives it one cycle at a time.

    The host constructs the display and keypad, feeds program bytes to
    `load_program`, calls `step_cycle` in its loop, forwards key events
    through `set_key_state` and asks for frames with `refresh_display`.
    """

    def __init__(
        self,
        display: Optional[Display] = None,
        keypad: Optional[Keypad] = None,
        config: Optional[InterpreterConfig] = None,
        rng: Optional[jax.Array] = None,
        clock: Optional[CycleClock] = None,
    ):
        self.config = config if config is not None else InterpreterConfig()
        self.display = display if display is not None else Display()
        self.keypad = keypad if keypad is not None else Keypad()
        self.rng = rng if rng is not None else jax.random.PRNGKey(self.config.seed)
        if clock is None and self.config.throttle:
            clock = CycleClock(self.config.cycle_hz)
        self.clock = clock
        self.logger = get_logger()
        if self.config.log_level is not None:
            set_log_level(self.config.log_level)
        self.cycles = 0
        self.initialize()

    def initialize(self):
        """Reset to power-on state: zeroed registers, font loaded, PC = I = 0x200."""
        self.display.clear()
        self.keypad.release_all()
        self.state: EmulatorState = create_state(self.rng, self.display, self.keypad)
        self.cycles = 0
        if self.clock is not None:
            self.clock.reset()

    def load_program(self, program: bytes):
        """Copy program bytes to 0x200 and reset PC."""
        self.state = load_program(self.state, program)
        self.logger.log_program_loaded(len(program), PROGRAM_START)

    def step_cycle(self):
        """Run one fetch/execute/timer cycle, paced by the cycle clock.

        Raises:
            Chip8Error: on a fatal fault. The state is left as it was before
                the cycle.
        """
        if self.clock is not None:
            self.clock.wait()
        try:
            self.state = step(self.state)
        except Chip8Error as e:
            self.logger.log_fault(e)
            raise
        self.cycles += 1
        if self.logger.is_enabled_for("DEBUG"):
            self.logger.debug(
                f"cycle {self.cycles}: opcode 0x{int(self.state.opcode):04X}, PC now 0x{self.pc:03X}"
            )

    def set_key_state(self, key: int, pressed: bool):
        self.keypad.set_key_state(key, pressed)

    def refresh_display(self) -> np.ndarray:
        return self.display.present()

    @property
    def pc(self) -> int:
        return int(self.state.pc)

    @property
    def waiting_for_key(self) -> bool:
        return self.state.awaiting_key != NOT_WAITING

    @property
    def sound_active(self) -> bool:
        """True while the sound timer is running. No tone is produced."""
        return int(self.state.sound_timer) > 0
