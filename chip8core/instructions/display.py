"""CHIP-8 display operations."""

from functools import partial

import jax
import jax.numpy as jnp
from chip8core.state import EmulatorState, register, with_registers
from chip8core.decode import DecodedInstruction
from chip8core.constants import SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH, ADDRESS_MASK, FLAG_REGISTER


@partial(jax.jit, static_argnums=5)
def draw_sprite(display, memory, index, sprite_x, sprite_y, height):
    """XOR a sprite of ``height`` rows onto the display, returning (display, collision)."""
    rows = jnp.arange(height)
    columns = jnp.arange(SPRITE_WIDTH)
    addresses = (jnp.astype(index, jnp.int32) + rows) & ADDRESS_MASK
    sprite_bytes = jnp.astype(memory[addresses], jnp.int32)
    bits = ((sprite_bytes[:, None] >> (7 - columns)[None, :]) & 1).astype(jnp.bool_)

    xx = jnp.broadcast_to((sprite_x + columns)[None, :] % SCREEN_WIDTH, bits.shape)
    yy = jnp.broadcast_to((sprite_y + rows)[:, None] % SCREEN_HEIGHT, bits.shape)
    sprite = jnp.zeros_like(display).at[xx, yy].set(bits)

    return display ^ sprite, jnp.any(display & sprite)


def execute_display(state: EmulatorState, instruction: DecodedInstruction) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N.

    Each pixel wraps around the screen edges on its own. Sprite rows are read
    from ``memory[(I + row) & 0xFFF]``. VF is set when any lit pixel is erased.
    """
    sprite_x = register(state, instruction.x) % SCREEN_WIDTH
    sprite_y = register(state, instruction.y) % SCREEN_HEIGHT

    display, collision = draw_sprite(
        state.display, state.memory, state.I, sprite_x, sprite_y, instruction.n
    )
    state = state.replace(display=display)
    return with_registers(state, (FLAG_REGISTER, int(collision)))
