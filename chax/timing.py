"""Fixed-rate cycle clock."""

import time
from typing import Callable, Optional


class CycleClock:
    """Paces cycles to a target frequency by sleeping out the remainder.

    `wait()` never sleeps longer than one interval and never spins.
    """

    def __init__(
        self,
        frequency: float = 60.0,
        time_fn: Callable[[], float] = time.perf_counter,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        if frequency <= 0:
            raise ValueError(f"frequency must be positive, got {frequency}")
        self.frequency = frequency
        self.time_fn = time_fn
        self.sleep_fn = sleep_fn
        self._last_tick: Optional[float] = None

    @property
    def interval(self) -> float:
        return 1.0 / self.frequency

    def wait(self) -> float:
        """Block until one interval has passed since the previous call.

        Returns:
            Seconds slept.
        """
        now = self.time_fn()
        slept = 0.0
        if self._last_tick is not None:
            remaining = self.interval - (now - self._last_tick)
            if remaining > 0:
                slept = min(remaining, self.interval)
                self.sleep_fn(slept)
                now = self.time_fn()
        self._last_tick = now
        return slept

    def reset(self):
        self._last_tick = None
