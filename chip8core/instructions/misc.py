"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
import numpy as np
from chip8core.state import (
    EmulatorState, register, with_registers, with_pc, with_memory, read_memory,
)
from chip8core.decode import DecodedInstruction
from chip8core.constants import FONT_START, FONT_CHAR_SIZE
from chip8core.errors import UnknownOpcodeError


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return with_registers(state, (instruction.x, int(state.delay_timer)))


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX0A - Wait for key press.

    Nothing blocks here: with no key down the program counter is wound back
    so the host re-executes this instruction on its next step. With several
    keys down the lowest index is taken.
    """
    pressed = np.flatnonzero(np.asarray(state.keypad))
    if pressed.size == 0:
        return with_pc(state, int(state.pc) - 2)
    return with_registers(state, (instruction.x, int(pressed[0])))


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=jnp.asarray(register(state, instruction.x), dtype=jnp.uint8))


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=jnp.asarray(register(state, instruction.x), dtype=jnp.uint8))


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX1E - Add VX to I register, wrapping at 16 bits. VF is not touched."""
    new_i = (int(state.I) + register(state, instruction.x)) & 0xFFFF
    return state.replace(I=jnp.asarray(new_i, dtype=jnp.uint16))


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    digit = register(state, instruction.x) & 0xF
    return state.replace(I=jnp.asarray(FONT_START + digit * FONT_CHAR_SIZE, dtype=jnp.uint16))


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = register(state, instruction.x)
    return with_memory(state, int(state.I), [value // 100, (value // 10) % 10, value % 10])


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I. I is left unchanged."""
    return with_memory(state, int(state.I), np.asarray(state.V)[:instruction.x + 1])


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I. I is left unchanged."""
    values = read_memory(state, int(state.I), instruction.x + 1)
    return with_registers(state, *enumerate(values))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """Dispatch misc instructions on the low byte."""
    handler = MISC_INSTRUCTIONS.get(instruction.nn)
    if handler is None:
        raise UnknownOpcodeError(instruction.raw)
    return handler(state, instruction)
