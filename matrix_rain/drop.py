"""Falling drop state, one per terminal column."""

from dataclasses import dataclass, field

from .prng import RandomSource

# Character sets
KATAKANA = "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヲン"
DIGITS = "0123456789"
LATIN_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
GLYPHS = KATAKANA + DIGITS + LATIN_UPPER

# Speed range, drawn once per drop
MIN_SPEED = 0.3
SPEED_SPAN = 0.7

# Milliseconds between steps for a drop of speed 1.0
STEP_INTERVAL = 100.0

MUTATION_RATE = 0.3


def random_glyph(rng: RandomSource) -> int:
    """Draw an index into GLYPHS."""
    return int(rng.random() * len(GLYPHS))


@dataclass
class Drop:
    """A single column's head position, fall speed and trail glyphs."""

    position: int
    speed: float
    glyphs: list[int] = field(default_factory=list)
    next_update: float = 0.0

    @classmethod
    def spawn(
        cls,
        rng: RandomSource,
        trail_length: int,
        height: int,
        random_start: bool,
    ) -> "Drop":
        """Create a fresh drop above the visible area.

        The initial population starts scattered up to a screen height above
        row 1; recycled drops start with their whole trail just off-screen.
        The order of random draws is fixed: glyphs, start offset, speed.
        """
        glyphs = [random_glyph(rng) for _ in range(trail_length)]
        if random_start:
            position = -int(rng.random() * height)
        else:
            position = -trail_length
        speed = MIN_SPEED + rng.random() * SPEED_SPAN
        return cls(position=position, speed=speed, glyphs=glyphs)

    @property
    def trail_length(self) -> int:
        return len(self.glyphs)

    @property
    def tail(self) -> int:
        """Row just behind the last trail cell."""
        return self.position - len(self.glyphs)

    def is_due(self, now: float) -> bool:
        return now >= self.next_update

    def advance(self, now: float, rng: RandomSource) -> None:
        """Move down one row and schedule the next step."""
        self.position += 1
        self.next_update = now + STEP_INTERVAL / self.speed

        # Shimmer: swap one trail glyph now and then
        if rng.random() < MUTATION_RATE:
            slot = int(rng.random() * len(self.glyphs))
            self.glyphs[slot] = random_glyph(rng)

    def is_exhausted(self, height: int) -> bool:
        """True once the whole trail has left the bottom of the screen."""
        return self.tail > height

    def glyph(self, offset: int) -> str:
        return GLYPHS[self.glyphs[offset]]
