"""Exceptions raised by the CHIP-8 machine."""

from typing import Optional


class Chip8Error(Exception):
    """Base exception for all machine errors.

    ``address`` is the pc of the failing instruction. Instruction handlers do
    not know it, so ``Machine.step`` fills it in before re-raising.
    """

    def __init__(self, message: str, address: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.address = address

    def __str__(self) -> str:
        if self.address is None:
            return self.message
        return f"{self.message} at 0x{self.address:03X}"


class ProgramTooLargeError(Chip8Error):
    """Program does not fit in the space above PROGRAM_START."""

    def __init__(self, size: int, capacity: int):
        super().__init__(f"Program of {size} bytes exceeds capacity of {capacity} bytes")
        self.size = size
        self.capacity = capacity


class UnknownOpcodeError(Chip8Error):
    """Instruction word matches no known pattern."""

    def __init__(self, opcode: int, address: Optional[int] = None):
        super().__init__(f"Unknown opcode 0x{opcode:04X}", address)
        self.opcode = opcode


class StackOverflowError(Chip8Error):
    """Subroutine call with a full stack."""
    pass


class StackUnderflowError(Chip8Error):
    """Return with an empty stack."""
    pass
