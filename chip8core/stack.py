"""CHIP-8 stack operations."""

import jax.numpy as jnp
import numpy as np
from chip8core.constants import STACK_SIZE
from chip8core.errors import StackOverflowError, StackUnderflowError
from chip8core.state import StackState


def push(stack: StackState, address: int) -> StackState:
    """Push address onto stack."""
    if stack.pointer >= STACK_SIZE:
        raise StackOverflowError(f"Stack overflow: more than {STACK_SIZE} nested calls")
    data = np.array(stack.data)
    data[stack.pointer] = address & 0xFFFF
    return stack.replace(data=jnp.asarray(data), pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, int]:
    """Pop address from stack."""
    if stack.pointer <= 0:
        raise StackUnderflowError("Stack underflow: return without matching call")
    new_pointer = stack.pointer - 1
    data = np.array(stack.data)
    popped_address = int(data[new_pointer])
    data[new_pointer] = 0
    return stack.replace(data=jnp.asarray(data), pointer=new_pointer), popped_address
