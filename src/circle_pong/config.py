from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class GameConfig:
    # Arena
    radius: float = 8.0
    paddle_half_width: float = 0.5  # radians

    # Grid
    grid_width: int = 41
    grid_height: int = 19
    scale: float = 2.0  # columns per arena unit
    aspect: float = 0.5  # vertical squash for character cells
    show_boundary: bool = True
    boundary_step_deg: float = 3.0
    paddle_draw_step: float = 0.05

    # Timing
    tick_interval: float = 0.1  # seconds

    # Ball
    initial_velocity: Tuple[float, float] = (0.3, 0.2)
    perturbation: float = 0.10
    inset: float = 0.1
    speed_up: float = 0.0  # per-component increment on every deflection
    max_speed: Optional[float] = None

    # Paddle control
    paddle_step: float = 0.2
    auto_jitter: float = 0.1
    auto_dead_zone: float = 0.05

    def __post_init__(self):
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        if not 0 < self.paddle_half_width <= math.pi:
            raise ValueError(f"paddle_half_width must be in (0, pi], got {self.paddle_half_width}")
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(f"grid must be non-empty, got {self.grid_width}x{self.grid_height}")
        if self.scale <= 0 or self.aspect <= 0:
            raise ValueError("scale and aspect must be positive")
        if self.boundary_step_deg <= 0 or self.paddle_draw_step <= 0:
            raise ValueError("drawing steps must be positive")
        if self.tick_interval < 0:
            raise ValueError(f"tick_interval must not be negative, got {self.tick_interval}")
        if len(self.initial_velocity) != 2:
            raise ValueError("initial_velocity must be an (vx, vy) pair")
        if self.perturbation < 0:
            raise ValueError(f"perturbation must not be negative, got {self.perturbation}")
        if not 0 < self.inset < self.radius:
            raise ValueError(f"inset must be in (0, radius), got {self.inset}")
        if self.speed_up < 0:
            raise ValueError(f"speed_up must not be negative, got {self.speed_up}")
        if self.max_speed is not None and self.max_speed <= 0:
            raise ValueError(f"max_speed must be positive, got {self.max_speed}")
        if self.paddle_step <= 0:
            raise ValueError(f"paddle_step must be positive, got {self.paddle_step}")
        if self.auto_jitter < 0 or self.auto_dead_zone < 0:
            raise ValueError("auto_jitter and auto_dead_zone must not be negative")


def config_preset(name: str | None) -> GameConfig:
    """Return a GameConfig for a named preset.

    Presets:
    - classic: the original fixed-speed game
    - arcade: the ball speeds up on every deflection, capped at 1.2 units/tick
    - wide: a wider paddle for practice
    """
    c = GameConfig()
    n = (name or "classic").lower().strip()
    if n == "classic":
        return c
    if n == "arcade":
        return replace(c, speed_up=0.02, max_speed=1.2)
    if n == "wide":
        return replace(c, paddle_half_width=0.8)
    raise ValueError(f"Unknown preset: {name}")


PRESETS = ("classic", "arcade", "wide")
