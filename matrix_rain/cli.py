"""Command line entry point for matrix-rain."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import DEFAULT_FPS, DEFAULT_TRAIL_LENGTH, RainConfig
from .engine import RainEngine
from .prng import create_random
from .scheduler import FrameScheduler
from .terminal import Terminal, TerminalError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrix-rain",
        description="Matrix-style character rain in a truecolor terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    matrix-rain                     # Run with defaults
    matrix-rain --seed 42           # Same animation on every run
    matrix-rain --fps 60 --trail 30 # Smoother refresh, longer trails

Press Ctrl+C to exit.
        """
    )
    parser.add_argument("--seed", "-s", type=int,
                        help="Seed for reproducible randomness")
    parser.add_argument("--fps", "-f", type=int, default=DEFAULT_FPS,
                        help=f"Target frames per second (default: {DEFAULT_FPS})")
    parser.add_argument("--trail", "-t", dest="trail_length", type=int,
                        default=DEFAULT_TRAIL_LENGTH,
                        help=f"Trail length (default: {DEFAULT_TRAIL_LENGTH})")
    parser.add_argument("--log-file",
                        help="Write log messages to this file instead of stderr")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log debug messages")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    # stdout belongs to the animation, so logs go to stderr or a file
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        filename=log_file,
    )


def parse_config(argv: Optional[Sequence[str]] = None) -> tuple[RainConfig, argparse.Namespace]:
    """Parse arguments into a normalized config, ignoring unknown flags."""
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    configure_logging(args.verbose, args.log_file)
    if unknown:
        logger.warning(f"Ignoring unknown arguments: {' '.join(unknown)}")

    config = RainConfig(seed=args.seed, fps=args.fps, trail_length=args.trail_length)
    return config.normalized(), args


def run(config: RainConfig, terminal: Optional[Terminal] = None) -> None:
    """Animate until SIGINT or SIGTERM, then restore the terminal."""
    terminal = terminal if terminal is not None else Terminal()
    rng = create_random(config.seed)
    engine = RainEngine(terminal, trail_length=config.trail_length, rng=rng)

    has_resize_signal = terminal.install_signal_handlers(engine)
    try:
        scheduler = FrameScheduler(engine, fps=config.fps, poll_resize=not has_resize_signal)
        scheduler.run()
    finally:
        terminal.restore_signal_handlers()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for the matrix-rain command."""
    config, _ = parse_config(argv)
    logger.debug(f"Starting with {config}")

    try:
        run(config)
    except TerminalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
