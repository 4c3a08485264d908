"""Interpreter configuration."""

from typing import Optional

from chex import dataclass

from chax.constants import CYCLE_HZ


@dataclass(frozen=True)
class InterpreterConfig:
    """Settings for an Interpreter.

    Attributes:
        cycle_hz: Target cycle rate when throttling
        throttle: Sleep between cycles to hold `cycle_hz`
        seed: Seed for the PRNG key used by CXNN when no key is supplied
        log_level: Level to set on the shared interpreter logger, or None to
            leave whatever level the host already chose
    """
    cycle_hz: float = CYCLE_HZ
    throttle: bool = True
    seed: int = 0
    log_level: Optional[str] = None
