"""Tests for the timer unit."""

import jax.numpy as jnp
from chip8core import tick_timers


def _with_timers(state, delay, sound):
    return state.replace(
        delay_timer=jnp.asarray(delay, dtype=jnp.uint8),
        sound_timer=jnp.asarray(sound, dtype=jnp.uint8),
    )


def test_both_timers_decrement(fresh_state):
    state, fired = tick_timers(_with_timers(fresh_state, 10, 5))

    assert state.delay_timer == 9
    assert state.sound_timer == 4
    assert not fired


def test_timers_stop_at_zero(fresh_state):
    state, fired = tick_timers(fresh_state)

    assert state.delay_timer == 0
    assert state.sound_timer == 0
    assert not fired


def test_sound_fires_on_one_to_zero(fresh_state):
    state, fired = tick_timers(_with_timers(fresh_state, 0, 1))
    assert state.sound_timer == 0
    assert fired

    state, fired = tick_timers(state)
    assert state.sound_timer == 0
    assert not fired


def test_sound_fires_once_per_countdown(fresh_state):
    state = _with_timers(fresh_state, 0, 4)
    events = []
    for _ in range(10):
        state, fired = tick_timers(state)
        events.append(fired)

    assert events == [False, False, False, True] + [False] * 6


def test_timers_are_independent(fresh_state):
    state = _with_timers(fresh_state, 1, 3)

    state, _ = tick_timers(state)
    assert state.delay_timer == 0
    assert state.sound_timer == 2

    state, _ = tick_timers(state)
    assert state.delay_timer == 0
    assert state.sound_timer == 1
