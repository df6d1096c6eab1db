"""
Animation loop — render, advance, pace, forever.

One simulation tick per rendered frame.  The loop has no exit state of
its own; it stops on an interrupt, an output error, or after
``max_frames`` when one is given.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .engine import BallSet, MapConfig
from .pacer import FramePacer
from .renderer import FieldSampler
from .terminal import AnsiTerminal

logger = logging.getLogger(__name__)


class AnimationLoop:
    """Owns the ball state, the sampler buffer and the pacer for one run.

    Parameters:
        config:   Run configuration.
        terminal: Output sink (``AnsiTerminal`` or anything with its methods).
        rng:      Random source for spawning; ``None`` = fresh unseeded.
        balls:    Pre-built balls, skipping random spawn.
        pacer:    Custom pacer, e.g. with a fake clock.
    """

    def __init__(
        self,
        config: MapConfig,
        terminal: AnsiTerminal,
        rng: Optional[np.random.Generator] = None,
        balls: Optional[BallSet] = None,
        pacer: Optional[FramePacer] = None,
    ) -> None:
        self.config = config
        self.terminal = terminal
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sampler = FieldSampler(config.width, config.height, config.threshold)
        self.balls = balls if balls is not None else BallSet.spawn(config, self.rng)
        self.pacer = pacer or FramePacer(config.fps, config.poll_interval)

        # FPS tracking
        self._fps_frames = 0
        self._fps_mark = 0.0

    # ── cycle steps ───────────────────────────────────────────────────────

    def render(self) -> None:
        rows = self.sampler.render_rows(self.balls, self.config.fill_char)
        for y, row in enumerate(rows):
            self.terminal.move_to(0, y)
            self.terminal.write(row)
        self.terminal.flush()

    def advance(self) -> None:
        self.balls.advance(self.config)

    def pace(self) -> None:
        released = self.pacer.wait()

        self._fps_frames += 1
        span = released - self._fps_mark
        if span >= 1.0:
            logger.debug("%.1f fps", self._fps_frames / span)
            self._fps_frames = 0
            self._fps_mark = released

    # ── main loop ─────────────────────────────────────────────────────────

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run until interrupted (or for ``max_frames`` frames).

        Returns the number of frames completed.
        """
        logger.info(
            "Animating %d balls at %d fps on %dx%d",
            len(self.balls), self.config.fps, self.config.width, self.config.height,
        )
        self.terminal.clear()
        self.terminal.hide_cursor()
        self.pacer.start()
        try:
            while max_frames is None or self.pacer.frame < max_frames:
                self.render()
                self.advance()
                self.pace()
        finally:
            self.terminal.show_cursor()
            self.terminal.flush()
            logger.info("Stopped after %d frames", self.pacer.frame)
        return self.pacer.frame
