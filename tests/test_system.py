"""Tests for system instructions (0xxx) and the call stack."""

import jax.numpy as jnp
import pytest
from chip8core import (
    execute, STACK_SIZE, StackOverflowError, StackUnderflowError, UnknownOpcodeError,
)


def test_execute_no_op(fresh_state):
    """0000 changes nothing."""
    state = execute(fresh_state, 0x0000)

    assert state.pc == fresh_state.pc
    assert jnp.array_equal(state.V, fresh_state.V)
    assert jnp.array_equal(state.memory, fresh_state.memory)


def test_execute_clear_screen(fresh_state):
    """Test 00E0 - Clear display."""
    state = fresh_state.replace(display=fresh_state.display.at[0, 0].set(True).at[63, 31].set(True))

    state = execute(state, 0x00E0)

    assert jnp.sum(state.display) == 0


@pytest.mark.parametrize("instruction", [0x0123, 0x00E1, 0x00FF, 0x0FEE])
def test_machine_code_routines_are_unknown(fresh_state, instruction):
    with pytest.raises(UnknownOpcodeError):
        execute(fresh_state, instruction)


def test_execute_call_and_return(fresh_state):
    """Test 2NNN (call) and 00EE (return) together."""
    state = fresh_state
    initial_pc = state.pc

    state = execute(state, 0x2300)  # Call 0x300
    assert state.pc == 0x300
    assert state.stack.pointer == 1
    assert state.stack.data[state.stack.pointer - 1] == initial_pc

    state = execute(state, 0x00EE)  # Return
    assert state.pc == initial_pc
    assert state.stack.pointer == 0


@pytest.mark.parametrize("target", [0x000, 0x2AE, 0xFFE])
def test_call_and_return_any_target(fresh_state, target):
    """Return lands on the instruction after the call for any NNN."""
    state = fresh_state.replace(pc=jnp.asarray(0x202, dtype=jnp.uint16))

    state = execute(state, 0x2000 | target)
    assert state.pc == target

    state = execute(state, 0x00EE)
    assert state.pc == 0x202


def test_nested_calls_return_in_order(fresh_state):
    state = execute(fresh_state.replace(pc=jnp.asarray(0x202, dtype=jnp.uint16)), 0x2300)
    state = execute(state.replace(pc=jnp.asarray(0x302, dtype=jnp.uint16)), 0x2400)

    state = execute(state, 0x00EE)
    assert state.pc == 0x302
    state = execute(state, 0x00EE)
    assert state.pc == 0x202


def test_stack_holds_sixteen_entries(fresh_state):
    state = fresh_state
    for _ in range(STACK_SIZE):
        state = execute(state, 0x2300)
    assert state.stack.pointer == STACK_SIZE


def test_stack_overflow(fresh_state):
    state = fresh_state
    for _ in range(STACK_SIZE):
        state = execute(state, 0x2300)

    with pytest.raises(StackOverflowError):
        execute(state, 0x2300)


def test_stack_underflow(fresh_state):
    with pytest.raises(StackUnderflowError):
        execute(fresh_state, 0x00EE)
