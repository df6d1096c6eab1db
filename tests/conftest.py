import pytest

from metaterm.engine import Ball, BallSet, MapConfig


class FakeClock:
    """Manual clock; ``sleep`` advances time instead of blocking."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class RecordingTerminal:
    """Output sink that records every call."""

    def __init__(self) -> None:
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def hide_cursor(self):
        self.calls.append(("hide_cursor",))

    def show_cursor(self):
        self.calls.append(("show_cursor",))

    def move_to(self, col, row):
        self.calls.append(("move_to", col, row))

    def write(self, text):
        self.calls.append(("write", text))

    def flush(self):
        self.calls.append(("flush",))

    def writes(self):
        return [c[1] for c in self.calls if c[0] == "write"]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def terminal():
    return RecordingTerminal()


@pytest.fixture
def small_scene():
    """10x5 grid with one still ball of radius 2 at (5, 2)."""
    config = MapConfig(width=10, height=5, ball_count=1, radius_range=(2.0, 2.0),
                       speed_range=(0.0, 0.0))
    balls = BallSet([Ball(radius=2.0, x=5.0, y=2.0)])
    return config, balls


# Expected glyphs for ``small_scene``: corners within distance 2 of the
# centre are hidden, everything else is visible.
SMALL_SCENE_ROWS = [
    "   AAAA   ",
    "  AA  AA  ",
    "  AA  AA  ",
    "   AAAA   ",
    "    AA    ",
]


@pytest.fixture
def small_scene_rows():
    return list(SMALL_SCENE_ROWS)
