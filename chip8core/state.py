"""CHIP-8 emulator state structures."""

import jax
import jax.numpy as jnp
import numpy as np
from flax.struct import dataclass, PyTreeNode, field

from chip8core.constants import (
    MEMORY_SIZE, PROGRAM_START, FONT_START, FONT_DATA, SCREEN_WIDTH, SCREEN_HEIGHT,
    STACK_SIZE, NUM_KEYS, NUM_REGISTERS, ADDRESS_MASK,
)


def _zeros(shape, dtype):
    return field(default_factory=lambda: jnp.zeros(shape, dtype=dtype))


@dataclass(frozen=True)
class StackState:
    """Stack state for subroutine calls."""
    data: jnp.ndarray = _zeros(STACK_SIZE, jnp.uint16)
    pointer: int = 0


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state."""
    rng: jax.Array
    memory: jnp.ndarray = _zeros(MEMORY_SIZE, jnp.uint8)
    pc: jnp.ndarray = field(default_factory=lambda: jnp.asarray(PROGRAM_START, dtype=jnp.uint16))
    display: jnp.ndarray = _zeros((SCREEN_WIDTH, SCREEN_HEIGHT), jnp.bool_)
    stack: StackState = field(default_factory=StackState)
    delay_timer: jnp.ndarray = _zeros((), jnp.uint8)
    sound_timer: jnp.ndarray = _zeros((), jnp.uint8)
    keypad: jnp.ndarray = _zeros(NUM_KEYS, jnp.bool_)
    V: jnp.ndarray = _zeros(NUM_REGISTERS, jnp.uint8)
    I: jnp.ndarray = _zeros((), jnp.uint16)


def create_state(rng: jax.Array = None) -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    if rng is None:
        rng = jax.random.PRNGKey(0)
    state = EmulatorState(rng)
    font = jnp.array(FONT_DATA, dtype=jnp.uint8)
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(font))


def register(state: EmulatorState, index: int) -> int:
    """Read one V register as a Python int."""
    return int(np.asarray(state.V)[index])


def with_registers(state: EmulatorState, *updates: tuple[int, int]) -> EmulatorState:
    """Write (index, value) pairs into V in order, so a trailing VF write wins."""
    V = np.array(state.V)
    for index, value in updates:
        V[index] = value
    return state.replace(V=jnp.asarray(V))


def with_pc(state: EmulatorState, pc: int) -> EmulatorState:
    """Set the program counter, wrapping at 16 bits."""
    return state.replace(pc=jnp.asarray(pc & 0xFFFF, dtype=jnp.uint16))


def with_memory(state: EmulatorState, start: int, values) -> EmulatorState:
    """Write bytes at start, start+1, ... with each address wrapped to 12 bits."""
    memory = np.array(state.memory)
    addresses = (start + np.arange(len(values))) & ADDRESS_MASK
    memory[addresses] = values
    return state.replace(memory=jnp.asarray(memory))


def read_memory(state: EmulatorState, start: int, count: int) -> np.ndarray:
    """Read count bytes from start with each address wrapped to 12 bits."""
    addresses = (start + np.arange(count)) & ADDRESS_MASK
    return np.asarray(state.memory)[addresses]
