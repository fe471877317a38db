"""Tests for text rendering of the framebuffer."""

import numpy as np
from chip8core import display_to_text, execute


def test_display_to_text(fresh_state):
    state = execute(fresh_state, 0xD005)  # Glyph 0 at (0, 0)

    lines = display_to_text(state.display).splitlines()

    assert len(lines) == 32
    assert all(len(line) == 64 for line in lines)
    assert lines[0].startswith("####.")
    assert lines[1].startswith("#..#.")
    assert lines[5] == "." * 64


def test_display_to_text_is_row_major():
    display = np.zeros((64, 32), dtype=bool)
    display[63, 0] = True
    display[0, 31] = True

    lines = display_to_text(display, on="X", off=" ").splitlines()

    assert lines[0] == " " * 63 + "X"
    assert lines[31] == "X" + " " * 63
