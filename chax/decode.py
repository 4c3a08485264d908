"""CHIP-8 instruction decoding."""

from chex import dataclass


@dataclass(frozen=True)
class DecodedInstruction:
    """A 16-bit instruction word split into its operand fields."""
    raw: int
    family: int  # bits 15-12, selects the instruction group
    x: int       # bits 11-8, register index
    y: int       # bits 7-4, register index
    n: int       # bits 3-0
    nn: int      # bits 7-0
    nnn: int     # bits 11-0, address

    def __str__(self) -> str:
        return f"0x{self.raw:04X}"


def decode(instruction: int) -> DecodedInstruction:
    """Split a 16-bit instruction into family and operand fields."""
    instruction = int(instruction) & 0xFFFF
    return DecodedInstruction(
        raw=instruction,
        family=instruction >> 12,
        x=(instruction >> 8) & 0xF,
        y=(instruction >> 4) & 0xF,
        n=instruction & 0xF,
        nn=instruction & 0xFF,
        nnn=instruction & 0xFFF,
    )
