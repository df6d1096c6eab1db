"""
Metaball physics engine.

Holds the run configuration and the ball state, and advances the balls
one tick at a time.  Balls bounce elastically off the grid walls and
never interact with each other.
"""

from __future__ import annotations

import logging
import math
import unicodedata
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .pacer import POLL_INTERVAL

logger = logging.getLogger(__name__)

Range = Tuple[float, float]


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MapConfig:
    """Immutable configuration for one animation run.

    ``width`` and ``height`` are in character cells and are captured from
    the terminal once at startup.  ``speed_range`` applies to each velocity
    axis separately and may include negative values (direction).
    """
    width: int
    height: int
    fill_char: str = "A"
    ball_count: int = 3
    radius_range: Range = (3.0, 10.0)
    speed_range: Range = (-2.0, 2.0)
    fps: int = 24
    threshold: float = 1.0
    poll_interval: float = POLL_INTERVAL

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if len(self.fill_char) != 1:
            raise ValueError(f"fill glyph must be a single character, got {self.fill_char!r}")
        if unicodedata.east_asian_width(self.fill_char) in ("W", "F") or unicodedata.combining(self.fill_char):
            raise ValueError(f"fill glyph must occupy exactly one cell, got {self.fill_char!r}")
        if self.ball_count < 1:
            raise ValueError(f"ball count must be positive, got {self.ball_count}")
        for name in ("radius_range", "speed_range", "threshold", "poll_interval"):
            values = getattr(self, name)
            if not all(math.isfinite(v) for v in np.atleast_1d(values)):
                raise ValueError(f"{name} must be finite, got {values}")
        r_min, r_max = self.radius_range
        if r_min <= 0 or r_min > r_max:
            raise ValueError(f"invalid radius range {self.radius_range}")
        s_min, s_max = self.speed_range
        if s_min > s_max:
            raise ValueError(f"invalid speed range {self.speed_range}")
        if self.fps < 1:
            raise ValueError(f"frame rate must be positive, got {self.fps}")
        if self.threshold <= 0:
            raise ValueError(f"threshold must be positive, got {self.threshold}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll interval must be positive, got {self.poll_interval}")

    @property
    def frame_interval(self) -> float:
        """Seconds per frame."""
        return 1.0 / self.fps


# ---------------------------------------------------------------------------
# Ball
# ---------------------------------------------------------------------------

@dataclass
class Ball:
    """A single ball in grid coordinates."""
    radius: float
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0

    def field_contribution(self, px: float, py: float) -> float:
        """Inverse-distance potential ``radius / distance`` at (px, py).

        A sample exactly at the centre is infinitely inside the ball.
        """
        dist = math.hypot(px - self.x, py - self.y)
        if dist == 0.0:
            return math.inf
        return self.radius / dist

    def advance(self, config: MapConfig) -> None:
        """Reflect off the walls, then move by one tick of velocity."""
        self.vx = _reflect(self.x, self.vx, self.radius, config.width)
        self.vy = _reflect(self.y, self.vy, self.radius, config.height)
        self.x += self.vx
        self.y += self.vy


def _reflect(pos: float, vel: float, radius: float, limit: float) -> float:
    # Edge touching the wall, or about to cross it this tick, turns inward.
    if vel < 0 and pos - radius + vel < 0:
        return -vel
    if vel > 0 and pos + radius + vel > limit:
        return -vel
    return vel


# ---------------------------------------------------------------------------
# Ball set
# ---------------------------------------------------------------------------

class BallSet:
    """Ordered collection of balls that together define the scalar field."""

    def __init__(self, balls: Optional[Sequence[Ball]] = None) -> None:
        self.balls: List[Ball] = list(balls or [])

    def __len__(self) -> int:
        return len(self.balls)

    def __iter__(self) -> Iterator[Ball]:
        return iter(self.balls)

    @classmethod
    def spawn(cls, config: MapConfig, rng: np.random.Generator) -> "BallSet":
        """Create ``config.ball_count`` balls fully inside the grid."""
        r_min, r_max = config.radius_range
        s_min, s_max = config.speed_range
        if min(config.width, config.height) < 2 * (r_max + max(abs(s_min), abs(s_max))):
            logger.warning(
                "Grid %dx%d is small for radius up to %.1f; balls may leave it",
                config.width, config.height, r_max,
            )

        balls: List[Ball] = []
        for _ in range(config.ball_count):
            radius = float(rng.uniform(r_min, r_max))
            balls.append(Ball(
                radius=radius,
                x=_spawn_coord(rng, radius, config.width),
                y=_spawn_coord(rng, radius, config.height),
                vx=float(rng.uniform(s_min, s_max)),
                vy=float(rng.uniform(s_min, s_max)),
            ))
        logger.info("Spawned %d balls on a %dx%d grid", len(balls), config.width, config.height)
        return cls(balls)

    # ── field ─────────────────────────────────────────────────────────────

    def field_at(self, px: float, py: float) -> float:
        """Sum of every ball's contribution at one point."""
        return sum((b.field_contribution(px, py) for b in self.balls), 0.0)

    def field_grid(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """Vectorised :meth:`field_at` over matching coordinate arrays."""
        field = np.zeros(np.shape(xs), dtype=np.float64)
        with np.errstate(divide="ignore"):
            for b in self.balls:
                dist = np.hypot(xs - b.x, ys - b.y)
                field += b.radius / dist
        return field

    # ── physics step ──────────────────────────────────────────────────────

    def advance(self, config: MapConfig) -> None:
        """Advance every ball by one tick."""
        for b in self.balls:
            b.advance(config)


def _spawn_coord(rng: np.random.Generator, radius: float, limit: int) -> float:
    if limit < 2 * radius:
        return limit / 2.0
    return float(rng.uniform(radius, limit - radius))
