"""Game constants.

All tuning values live in one frozen dataclass so a run can be built
with different geometry (tests use small screens) without touching
module globals.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable game constants."""

    # Grid size in characters
    screen_width: int = 90
    screen_height: int = 28

    # Physics (per tick)
    gravity: float = 0.5
    flap_strength: float = -1.5

    # Obstacles
    pipe_speed: float = 1.0
    pipe_frequency: int = 20  # Ticks between spawns, lower means more pipes
    pipe_gap_size: int = 5
    gap_margin: int = 8  # Gap centre stays this far from top and bottom

    # Bird lane
    bird_x: int = 20

    # Idle hover
    hover_step: float = 0.1
    hover_limit: float = 0.5

    def __post_init__(self) -> None:
        if self.screen_width < 1:
            raise ValueError(f"screen_width must be positive, got {self.screen_width}")
        if self.screen_height < 2 * self.gap_margin:
            raise ValueError(
                f"screen_height {self.screen_height} too small for gap margin {self.gap_margin}"
            )
        if not 0 <= self.bird_x < self.screen_width:
            raise ValueError(f"bird_x {self.bird_x} outside grid of width {self.screen_width}")
        if self.pipe_frequency < 1:
            raise ValueError(f"pipe_frequency must be positive, got {self.pipe_frequency}")
        if self.pipe_speed <= 0:
            raise ValueError(f"pipe_speed must be positive, got {self.pipe_speed}")
        if self.pipe_gap_size < 1:
            raise ValueError(f"pipe_gap_size must be positive, got {self.pipe_gap_size}")

    @property
    def gap_half_width(self) -> int:
        """Half the gap height, always rounded down."""
        return self.pipe_gap_size // 2

    @property
    def floor_y(self) -> int:
        """Row of the ground; reaching it ends the run."""
        return self.screen_height - 1

    @property
    def mid_y(self) -> int:
        return self.screen_height // 2

    @property
    def gap_range(self) -> tuple[int, int]:
        """Inclusive range the gap centre is drawn from."""
        return self.gap_margin, self.screen_height - self.gap_margin


DEFAULT_CONFIG = GameConfig()
