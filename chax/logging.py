"""Console logging for the interpreter and its host.

Output goes to stdout, one line per event, tagged with the level, the
logger name and the seconds since the logger was created. The interpreter
shares a single `InterpreterLogger`, so a level set by the host applies
everywhere.
"""

import sys
import time
from collections import deque
from typing import Deque, Optional, Tuple

RESET = "\033[0m"


class ConsoleLogger:
    """Print-based logger that drops events below its threshold."""

    SEVERITY = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40, "CRITICAL": 50}
    ANSI = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }

    def __init__(
        self,
        name: str = "chax",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream=None,
    ):
        self.name = name
        self.stream = stream
        self.colored = use_colors and getattr(self.output, "isatty", lambda: False)()
        self.show_timestamps = show_timestamps
        self.created = time.time()
        self.set_level(log_level)

    @property
    def output(self):
        """The target stream; stdout is looked up on every write when none was given."""
        return self.stream if self.stream is not None else sys.stdout

    def set_level(self, log_level: str):
        name = log_level.upper()
        if name not in self.SEVERITY:
            raise ValueError(
                f"Unknown log level '{log_level}', expected one of {', '.join(self.SEVERITY)}"
            )
        self.log_level = name

    def is_enabled_for(self, level: str) -> bool:
        """Whether a message at `level` would be written."""
        return self.SEVERITY[level.upper()] >= self.SEVERITY[self.log_level]

    def render(self, level: str, message: str) -> str:
        tag = f"[{level:>8s}]"
        if self.colored:
            tag = self.ANSI[level] + tag + RESET
        if self.show_timestamps:
            tag = f"[{time.time() - self.created:8.2f}s]" + tag
        return f"{tag}[{self.name}] {message}"

    def log(self, level: str, message: str):
        level = level.upper()
        if self.is_enabled_for(level):
            print(self.render(level, message), file=self.output, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)

    def critical(self, message: str):
        self.log("CRITICAL", message)


class InterpreterLogger(ConsoleLogger):
    """Logger with interpreter-specific events and an unknown-opcode history."""

    def __init__(self, name: str = "chax", history_size: int = 256, **kwargs):
        super().__init__(name, **kwargs)
        self.unknown_opcodes: Deque[Tuple[int, int]] = deque(maxlen=history_size)

    def log_program_loaded(self, size: int, start: int):
        self.info(f"Loaded {size} bytes at 0x{start:03X}-0x{start + size - 1:03X}"
                  if size else f"Loaded empty program at 0x{start:03X}")

    def log_unknown_opcode(self, opcode: int, pc: int):
        """Record and report an opcode no handler recognises."""
        self.unknown_opcodes.append((opcode, pc))
        self.warning(f"Unknown opcode 0x{opcode:04X} at PC 0x{pc:03X}")

    def log_fault(self, error: Exception):
        self.critical(f"{type(error).__name__}: {error}")

    def clear_history(self):
        self.unknown_opcodes.clear()


_logger: Optional[InterpreterLogger] = None


def get_logger() -> InterpreterLogger:
    """Return the shared interpreter logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = InterpreterLogger()
    return _logger


def set_log_level(log_level: str):
    get_logger().set_level(log_level)
