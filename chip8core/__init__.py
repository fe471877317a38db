"""CHIP-8 virtual machine package."""

from chip8core.state import EmulatorState, StackState, create_state
from chip8core.emulator import execute, fetch, load_program, load_rom, run_frames
from chip8core.decode import DecodedInstruction, decode
from chip8core.timers import tick_timers
from chip8core.machine import Machine
from chip8core.errors import (
    Chip8Error, ProgramTooLargeError, UnknownOpcodeError, StackOverflowError, StackUnderflowError,
)
from chip8core.constants import *
from chip8core.rendering import display_to_text

__all__ = [
    "EmulatorState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "load_program",
    "load_rom",
    "run_frames",
    "tick_timers",
    "Machine",
    "DecodedInstruction",
    "decode",
    "Chip8Error",
    "ProgramTooLargeError",
    "UnknownOpcodeError",
    "StackOverflowError",
    "StackUnderflowError",
    "MEMORY_SIZE",
    "PROGRAM_START",
    "FONT_START",
    "FONT_DATA",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "display_to_text",
]
