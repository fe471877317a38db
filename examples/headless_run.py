"""Run a CHIP-8 ROM without a window and print the final screen.

Usage: python examples/headless_run.py ROM [FRAMES]
"""

import sys

from chip8core import Machine, run_frames, display_to_text
from chip8core.logging import MachineLogger

if __name__ == "__main__":
    rom_path = sys.argv[1]
    frames = int(sys.argv[2]) if len(sys.argv) > 2 else 120

    machine = Machine(seed=0, logger=MachineLogger(log_level="INFO"))
    machine.load_rom(rom_path)

    # 10 instructions per 60 Hz frame is roughly 600 Hz
    beeps = run_frames(machine, frames, instructions_per_frame=10, progress=True)

    print(display_to_text(machine.framebuffer))
    print(f"Sound triggers: {beeps}")
