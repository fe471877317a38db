"""Text rendering of the framebuffer for headless hosts."""

import numpy as np


def display_to_text(display, on: str = "#", off: str = ".") -> str:
    """Render the display as one text line per screen row.

    Args:
        display: Boolean array of shape (64, 32) indexed ``[x, y]``
        on: Character for lit pixels
        off: Character for unlit pixels
    """
    pixels = np.asarray(display, dtype=np.bool_).T
    return "\n".join("".join(on if lit else off for lit in row) for row in pixels)
