"""ANSI escape sequences for cursor movement and truecolor output."""

CSI = "\x1b["

# Terminal control
HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
CLEAR_SCREEN = f"{CSI}2J"
RESET = f"{CSI}0m"


def move_to(row: int, col: int) -> str:
    """Position the cursor at a 1-based row and column."""
    return f"{CSI}{row};{col}H"


def rgb(r: int, g: int, b: int) -> str:
    """Set a 24-bit foreground color."""
    return f"{CSI}38;2;{r};{g};{b}m"


WHITE = rgb(255, 255, 255)
