"""Host-facing CHIP-8 machine."""

import secrets
from typing import Callable, Optional

import jax
import numpy as np

from chip8core.constants import MAX_PROGRAM_SIZE, NUM_KEYS
from chip8core.emulator import execute, fetch, load_program, load_rom
from chip8core.errors import Chip8Error
from chip8core.logging import ConsoleLogger, MachineLogger
from chip8core.state import EmulatorState, create_state
from chip8core.timers import tick_timers


class Machine:
    """A single CHIP-8 machine driven by a host loop.

    The host calls :meth:`step` several hundred times per second and
    :meth:`tick_timers` at 60 Hz, updating keys with :meth:`set_key` in
    between and reading :attr:`framebuffer` to render.

    Args:
        seed: Seed for the CXNN random source. ``None`` draws one from the OS.
        logger: Logger for lifecycle events and failures.
        on_sound: Called each time the sound timer runs out.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        logger: Optional[ConsoleLogger] = None,
        on_sound: Optional[Callable[[], None]] = None,
    ):
        if seed is None:
            seed = secrets.randbits(32)
        self.seed = seed
        self.logger = logger or MachineLogger()
        self.on_sound = on_sound
        self._initial_state = create_state(jax.random.PRNGKey(seed))
        self._state = self._initial_state

    @property
    def state(self) -> EmulatorState:
        """Current immutable state snapshot."""
        return self._state

    @property
    def framebuffer(self) -> np.ndarray:
        """Read-only (64, 32) boolean display, indexed ``[x, y]``."""
        pixels = np.asarray(self._state.display)
        pixels.flags.writeable = False
        return pixels

    def reset(self):
        """Return to the power-on state."""
        self._state = self._initial_state
        self.logger.log_reset()

    def load(self, data: bytes):
        """Install a program at 0x200.

        Raises:
            ProgramTooLargeError: ``data`` does not fit; the machine is unchanged.
        """
        self._state = load_program(self._state, bytes(data))
        self.logger.log_program_loaded(len(data), MAX_PROGRAM_SIZE)

    def load_rom(self, filename: str):
        """Install a program read from a ROM file."""
        self._state = load_rom(self._state, filename)
        self.logger.info(f"Loaded ROM: {filename}")

    def step(self) -> int:
        """Run one fetch/decode/execute cycle and return the executed word.

        On failure the machine keeps its state from before the step.
        """
        pc = int(self._state.pc)
        state, instruction = fetch(self._state)
        try:
            state = execute(state, instruction)
        except Chip8Error as e:
            if e.address is None:
                e.address = pc
            self.logger.log_failure(e, pc)
            raise
        self._state = state
        return instruction

    def tick_timers(self) -> bool:
        """Decrement the timers; True when the sound timer just ran out."""
        self._state, sound_fired = tick_timers(self._state)
        if sound_fired:
            self.logger.log_sound()
            if self.on_sound is not None:
                self.on_sound()
        return sound_fired

    def set_key(self, index: int, pressed: bool):
        """Update one key latch."""
        if not 0 <= index < NUM_KEYS:
            raise ValueError(f"Key index must be in [0, {NUM_KEYS}), got {index}")
        self._state = self._state.replace(keypad=self._state.keypad.at[index].set(bool(pressed)))
