"""
Metaball rasteriser — samples the ball field on the character grid.

Every cell looks at the field on its four integer corners.  A corner is
*visible* when the summed field there is below the threshold.  Cells with
a mix of visible and hidden corners straddle the iso-contour and get the
fill glyph; cells entirely outside or entirely inside the blobs stay blank,
so only a one-cell band along each blob's edge is drawn.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

import numpy as np

if TYPE_CHECKING:
    from .engine import BallSet

logger = logging.getLogger(__name__)

# Corner slots in the visibility buffer
TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT = range(4)

BLANK = " "


def draws_count(count):
    """Draw rule on visible-corner counts: some corners visible, not all four.

    Works on a plain int or elementwise on a count array.
    """
    return (count > 0) & (count < 4)


def should_draw(top_left: bool, top_right: bool, bottom_left: bool, bottom_right: bool) -> bool:
    """Draw decision for a single cell."""
    return bool(draws_count(int(top_left) + int(top_right) + int(bottom_left) + int(bottom_right)))


class FieldSampler:
    """Corner sampler and cell classifier for a fixed-size grid.

    Parameters:
        width:     Grid width in cells.
        height:    Grid height in cells.
        threshold: Field value separating visible from hidden corners.

    The ``corners`` buffer has shape ``(height, width, 4)`` and is
    overwritten on every :meth:`sample` call.
    """

    def __init__(self, width: int, height: int, threshold: float = 1.0) -> None:
        self.width = width
        self.height = height
        self.threshold = threshold
        self.corners = np.zeros((height, width, 4), dtype=bool)

        # Corner lattice is one larger than the cell grid on each axis
        self._ys, self._xs = np.meshgrid(
            np.arange(height + 1, dtype=np.float64),
            np.arange(width + 1, dtype=np.float64),
            indexing="ij",
        )
        logger.debug("Sampler allocated for %dx%d cells", width, height)

    def sample(self, balls: "BallSet") -> np.ndarray:
        """Fill the corner buffer and return the ``(height, width)`` draw mask."""
        visible = balls.field_grid(self._xs, self._ys) < self.threshold

        # Cell (x, y): top corners on lattice row y + 1, bottom on row y
        c = self.corners
        c[..., TOP_LEFT] = visible[1:, :-1]
        c[..., TOP_RIGHT] = visible[1:, 1:]
        c[..., BOTTOM_LEFT] = visible[:-1, :-1]
        c[..., BOTTOM_RIGHT] = visible[:-1, 1:]

        return draws_count(c.sum(axis=2))

    def render_rows(self, balls: "BallSet", fill_char: str) -> List[str]:
        """One string per grid row, first row first."""
        mask = self.sample(balls)
        glyphs = np.where(mask, fill_char, BLANK)
        return ["".join(row) for row in glyphs]
