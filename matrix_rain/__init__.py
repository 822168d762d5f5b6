"""
Matrix Rain - truecolor character rain for ANSI terminals.

Basic Usage:
    from matrix_rain import RainConfig, run
    run(RainConfig(seed=42))

Driving the engine yourself:
    from matrix_rain import RainEngine, FrameScheduler, Terminal

    engine = RainEngine(Terminal(), trail_length=20)
    FrameScheduler(engine, fps=30).run()
"""

import logging

__version__ = "1.0.0"

from .config import RainConfig
from .drop import GLYPHS, Drop
from .engine import EngineState, RainEngine
from .gradient import build_gradient, gradient_escapes
from .prng import Mulberry32, create_random
from .scheduler import FrameScheduler
from .terminal import Terminal, TerminalError
from .cli import main, run

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "RainEngine",
    "EngineState",
    "FrameScheduler",
    "Drop",
    "GLYPHS",
    # Randomness and color
    "Mulberry32",
    "create_random",
    "build_gradient",
    "gradient_escapes",
    # Glue
    "RainConfig",
    "Terminal",
    "TerminalError",
    "run",
    "main",
]
