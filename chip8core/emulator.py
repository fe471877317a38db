"""Main CHIP-8 emulator execution engine."""

import jax.numpy as jnp
from tqdm import tqdm

from chip8core.state import EmulatorState, read_memory, with_pc
from chip8core.decode import decode
from chip8core.constants import PROGRAM_START, MAX_PROGRAM_SIZE
from chip8core.errors import ProgramTooLargeError
from chip8core.instructions.system import execute_system_instruction
from chip8core.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset, execute_skip_if_key
)
from chip8core.instructions.alu import execute_alu_operation
from chip8core.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8core.instructions.display import execute_display
from chip8core.instructions.misc import execute_misc_instruction

# Indexed by the first nibble of the instruction word
INSTRUCTION_GROUPS = [
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
]


def execute(state: EmulatorState, instruction: int) -> EmulatorState:
    """Execute single CHIP-8 instruction.

    Raises:
        UnknownOpcodeError: the word matches no instruction.
        StackOverflowError, StackUnderflowError: call/return past the stack bounds.
    """
    decoded_instruction = decode(instruction)
    return INSTRUCTION_GROUPS[decoded_instruction.opcode](state, decoded_instruction)


def _pack_u16(high: int, low: int) -> int:
    """Pack two bytes into uint16."""
    return (high << 8) | low


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch next instruction from memory."""
    pc = int(state.pc)
    high, low = read_memory(state, pc, 2)
    return with_pc(state, pc + 2), _pack_u16(int(high), int(low))


def load_program(state: EmulatorState, data: bytes) -> EmulatorState:
    """Load program bytes into CHIP-8 memory starting at 0x200."""
    if len(data) > MAX_PROGRAM_SIZE:
        raise ProgramTooLargeError(len(data), MAX_PROGRAM_SIZE)
    if not data:
        return state
    program = jnp.array(list(data), dtype=jnp.uint8)
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(data)].set(program)
    return state.replace(memory=new_memory)


def load_rom(state: EmulatorState, filename: str) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    return load_program(state, rom_data)


def run_frames(machine, num_frames: int, instructions_per_frame: int = 10, progress: bool = False) -> int:
    """Drive a machine headlessly: each frame runs N instructions then one timer tick.

    Returns how many times the sound timer ran out.
    """
    sound_events = 0
    for _ in tqdm(range(num_frames), desc="Running", unit="frame", disable=not progress):
        for _ in range(instructions_per_frame):
            machine.step()
        sound_events += machine.tick_timers()
    return sound_events
