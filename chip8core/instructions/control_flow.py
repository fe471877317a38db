"""CHIP-8 control flow instructions."""

import numpy as np
from chip8core.state import EmulatorState, register, with_pc
from chip8core.decode import DecodedInstruction
from chip8core.errors import UnknownOpcodeError
from chip8core.stack import push


def _skip(state: EmulatorState) -> EmulatorState:
    return with_pc(state, int(state.pc) + 2)


def execute_jump(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return with_pc(state, instruction.nnn)


def execute_call(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, int(state.pc)))
    return execute_jump(state, instruction)


def make_skip_instruction(condition_fn, require_zero_n=False):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
        if require_zero_n and instruction.n != 0:
            raise UnknownOpcodeError(instruction.raw)
        if condition_fn(state, instruction):
            return _skip(state)
        return state
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: register(state, inst.x) == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: register(state, inst.x) != inst.nn
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: register(state, inst.x) == register(state, inst.y),
    require_zero_n=True,
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: register(state, inst.x) != register(state, inst.y),
    require_zero_n=True,
)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    return with_pc(state, instruction.nnn + register(state, 0))


def execute_skip_if_key(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    if instruction.nn not in (0x9E, 0xA1):
        raise UnknownOpcodeError(instruction.raw)

    key_index = register(state, instruction.x) & 0xF
    key_pressed = bool(np.asarray(state.keypad)[key_index])
    is_not_instruction = instruction.nn == 0xA1

    if key_pressed ^ is_not_instruction:
        return _skip(state)
    return state
