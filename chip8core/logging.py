"""Console logging utilities for the CHIP-8 machine.

This module provides a small levelled logger with optional colours and
elapsed-time stamps, and a machine-specific logger that knows how to report
program loads, resets, sound events and execution failures.
"""

import time
import sys

from chip8core.errors import Chip8Error

LEVEL_ORDER = {
    "DEBUG": 0,
    "INFO": 1,
    "WARNING": 2,
    "ERROR": 3,
    "CRITICAL": 4,
}

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "ERROR": "\033[31m",
}
RESET_COLOR = "\033[0m"


class ConsoleLogger:
    """Levelled console logger.

    ``log_level`` may be any name in ``LEVEL_ORDER``; ``"CRITICAL"`` silences
    everything this package emits.
    """

    def __init__(
        self,
        name: str = "chip8core",
        log_level: str = "WARNING",
        use_colors: bool = True,
        show_timestamps: bool = True,
    ):
        self.name = name
        self.log_level = log_level.upper()
        self.use_colors = (
            use_colors and hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def _should_log(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        return LEVEL_ORDER.get(level, 1) >= LEVEL_ORDER.get(self.log_level, 1)

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        if self.use_colors:
            level_str = f"{LEVEL_COLORS.get(level, '')}{level_str}{RESET_COLOR}"

        return f"{timestamp}{level_str}[{self.name}] {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self._should_log(level):
            print(self._format_message(level, message), flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def error(self, message: str):
        self.log("ERROR", message)


class MachineLogger(ConsoleLogger):
    """Logger with helpers for machine lifecycle events."""

    def __init__(self, name: str = "Machine", **kwargs):
        super().__init__(name, **kwargs)

    def log_program_loaded(self, size: int, capacity: int):
        self.info(f"Loaded program: {size} bytes ({size / capacity * 100:.1f}% of program space)")

    def log_reset(self):
        self.debug("Machine reset")

    def log_sound(self):
        self.debug("Sound timer expired")

    def log_failure(self, error: Chip8Error, pc: int):
        self.error(f"{type(error).__name__} at pc=0x{pc:03X}: {error.message}")
