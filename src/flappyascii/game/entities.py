"""Bird and obstacle entities.

Pure data plus per-tick update and query methods. Nothing here draws or
reads input; the engine drives them one tick at a time.
"""

import math
import logging

from flappyascii.game.config import GameConfig, DEFAULT_CONFIG
from flappyascii.game.rng import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


class Bird:
    """The player avatar.

    ``x`` is the fixed lane; ``y`` is a fractional row kept inside
    ``[1, screen_height - 1]``.
    """

    def __init__(self, y: float, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.x = config.bird_x
        self.y = float(y)
        self.velocity = 0.0
        self.animation_offset = 0.0
        self.animation_direction = config.hover_step

        # Keep the bird within bounds
        if self.y < 1:
            self.y = 1.0
        if self.y > config.screen_height - 2:
            self.y = float(config.screen_height - 2)

    @property
    def row(self) -> int:
        """Integer row used for collision and drawing."""
        return math.floor(self.y)

    def flap(self) -> None:
        """Replace the current velocity with the upward impulse."""
        self.velocity = self.config.flap_strength

    def update(self, has_started: bool) -> None:
        """Advance one tick.

        Args:
            has_started: False while waiting for the first input; the bird
                then hovers around mid-screen instead of falling.
        """
        if has_started:
            self.velocity += self.config.gravity
            self.y += self.velocity

            # Ceiling and floor absorb momentum
            if self.y < 1:
                self.y = 1.0
                self.velocity = 0.0
            if self.y >= self.config.floor_y:
                self.y = float(self.config.floor_y)
                self.velocity = 0.0
        else:
            self.animation_offset += self.animation_direction
            if abs(self.animation_offset) > self.config.hover_limit:
                self.animation_direction *= -1
            self.y = self.config.mid_y + self.animation_offset

    def __repr__(self) -> str:
        return f"Bird(x={self.x}, y={self.y:.2f}, velocity={self.velocity:.2f})"


class Obstacle:
    """A vertical pipe with a passable gap."""

    def __init__(
        self,
        x: float,
        config: GameConfig = DEFAULT_CONFIG,
        rng: RandomSource | None = None,
        gap_center: int | None = None,
    ) -> None:
        self.config = config
        self.x = float(x)
        if gap_center is None:
            low, high = config.gap_range
            gap_center = (rng or SystemRandomSource()).randint(low, high)
        self.gap_center = gap_center
        self.passed = False

    @property
    def column(self) -> int:
        """Integer column used for collision and drawing."""
        return math.floor(self.x)

    @property
    def gap_top(self) -> int:
        return self.gap_center - self.config.gap_half_width

    @property
    def gap_bottom(self) -> int:
        return self.gap_center + self.config.gap_half_width

    def in_gap(self, row: int) -> bool:
        """Check if a row lies inside the opening (edges included)."""
        return self.gap_top <= row <= self.gap_bottom

    def advance(self) -> None:
        self.x -= self.config.pipe_speed

    def is_colliding_with(self, bird: Bird) -> bool:
        """True when the pipe shares the bird's lane and the bird is outside the gap."""
        if self.column != bird.x:
            return False
        return not self.in_gap(bird.row)

    def is_offscreen(self) -> bool:
        return self.x < 0

    def __repr__(self) -> str:
        return f"Obstacle(x={self.x:.1f}, gap_center={self.gap_center}, passed={self.passed})"
