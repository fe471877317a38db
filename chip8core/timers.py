"""CHIP-8 delay and sound timers."""

import jax.numpy as jnp
from chip8core.state import EmulatorState


def tick_timers(state: EmulatorState) -> tuple[EmulatorState, bool]:
    """Decrement both timers once, as the host does at 60 Hz.

    Returns the new state and whether the sound timer just ran out (1 -> 0),
    which is the moment a host should start its beep.
    """
    delay_timer = int(state.delay_timer)
    sound_timer = int(state.sound_timer)
    sound_fired = sound_timer == 1

    if delay_timer > 0:
        state = state.replace(delay_timer=jnp.asarray(delay_timer - 1, dtype=jnp.uint8))
    if sound_timer > 0:
        state = state.replace(sound_timer=jnp.asarray(sound_timer - 1, dtype=jnp.uint8))
    return state, sound_fired
