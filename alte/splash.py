"""Start-up splash animation: a neon glyph drawn stroke by stroke."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]

SPLASH_WIDTH = 480
SPLASH_HEIGHT = 360
NEON_COLOR = (0, 199, 164)
OPACITY_DURATION_RATIO = 0.7
CROSSBAR_HEIGHT_RATIO = 0.4


@dataclass(frozen=True)
class Stroke:
    """A stroke of the glyph: a quadratic curve when ``control`` is set, else a line."""

    start: Point
    end: Point
    control: Point | None = None


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(value, high))


def _lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def glyph_progress(column_height: float, height: float) -> float:
    """Fraction of the glyph drawn for a given animated column height."""
    return _clamp(column_height / (height / 2.0))


def stroke_width(progress: float) -> int:
    """Pen width for the glyph at ``progress``."""
    return 2 + int(progress * 4)


def glyph_strokes(width: float, height: float, column_height: float) -> list[Stroke]:
    """Strokes of the glyph as drawn on a ``width`` x ``height`` surface."""
    if column_height <= 0:
        return []
    progress = glyph_progress(column_height, height)
    if progress <= 0:
        return []

    center_x = width / 2.0
    bottom_y = height * 0.75
    char_height = height * 0.4
    char_width = char_height * 0.75

    top = (center_x, bottom_y - char_height)
    bottom_left = (center_x - char_width / 2.0, bottom_y)
    bottom_right = (center_x + char_width / 2.0, bottom_y)
    bar_y = bottom_y - char_height * CROSSBAR_HEIGHT_RATIO
    bar_half = char_width / 2.0 * (1.0 - CROSSBAR_HEIGHT_RATIO)
    bar_left = (center_x - bar_half, bar_y)
    bar_right = (center_x + bar_half, bar_y)

    strokes: list[Stroke] = []

    left_part = _clamp(progress / 0.4)
    if left_part > 0:
        control = (top[0] - char_width * 0.25, top[1] + (bottom_left[1] - top[1]) * 0.5)
        strokes.append(Stroke(
            start=top,
            end=_lerp(top, bottom_left, left_part),
            control=_lerp(top, control, left_part),
        ))

    if progress > 0.2:
        right_part = _clamp((progress - 0.2) / 0.5)
        if right_part > 0:
            control = (top[0] + char_width * 0.25, top[1] + (bottom_right[1] - top[1]) * 0.5)
            strokes.append(Stroke(
                start=top,
                end=_lerp(top, bottom_right, right_part),
                control=_lerp(top, control, right_part),
            ))

    if progress > 0.5:
        bar_part = _clamp((progress - 0.5) / 0.5)
        if bar_part > 0:
            strokes.append(Stroke(start=bar_left, end=_lerp(bar_left, bar_right, bar_part)))

    return strokes


def _out_cubic(t: float) -> float:
    t -= 1.0
    return t * t * t + 1.0


def _fraction(elapsed_ms: float, duration_ms: int) -> float:
    if duration_ms <= 0:
        return 1.0
    return _clamp(elapsed_ms / duration_ms)


class SplashAnimation:
    """Timeline of the glyph animation: column height eased out, opacity linear."""

    def __init__(self, width: int = SPLASH_WIDTH, height: int = SPLASH_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.started = False
        self.duration_ms = 0
        self.opacity_duration_ms = 0

    def start(self, duration_ms: int) -> None:
        """Start the animation; it runs for ``duration_ms`` milliseconds."""
        if duration_ms < 0:
            raise ValueError("duration must not be negative")
        self.started = True
        self.duration_ms = duration_ms
        self.opacity_duration_ms = int(duration_ms * OPACITY_DURATION_RATIO)

    def state_at(self, elapsed_ms: float) -> tuple[float, float]:
        """Column height and opacity ``elapsed_ms`` after the start."""
        if not self.started:
            return 0.0, 0.0
        elapsed_ms = max(0.0, elapsed_ms)
        height = (self.height / 2.0) * _out_cubic(_fraction(elapsed_ms, self.duration_ms))
        opacity = _fraction(elapsed_ms, self.opacity_duration_ms)
        return height, opacity

    def finished_at(self, elapsed_ms: float) -> bool:
        """Whether both parts of the animation are over after ``elapsed_ms``."""
        return self.started and elapsed_ms >= max(self.duration_ms, self.opacity_duration_ms)