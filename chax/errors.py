"""CHIP-8 interpreter faults.

Every exception here is fatal: it aborts the current cycle and leaves the
emulator state as it was before the cycle started. Unknown opcodes are not
faults; they are reported through the logger and execution continues.
"""


class Chip8Error(Exception):
    """Base class for fatal interpreter errors."""


class MemoryAccessError(Chip8Error):
    """Raised when a fetch or data access falls outside addressable memory."""

    def __init__(self, address: int, operation: str, length: int = 1):
        self.address = address
        self.operation = operation
        self.length = length
        super().__init__(
            f"{operation}: access of {length} byte(s) at 0x{address:04X} "
            f"is outside memory"
        )


class StackOverflowError(Chip8Error):
    """Raised when a call is made with every stack slot in use."""

    def __init__(self, address: int):
        self.address = address
        super().__init__(f"Stack overflow on call from PC 0x{address:03X}")


class StackUnderflowError(Chip8Error):
    """Raised when a return is executed with an empty stack."""

    def __init__(self, address: int):
        self.address = address
        super().__init__(f"Stack underflow on return at PC 0x{address:03X}")


class ProgramLoadError(Chip8Error):
    """Raised when a program is missing, empty or too large for memory."""
