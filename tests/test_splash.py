import pytest

from alte.splash import (
    SplashAnimation,
    Stroke,
    glyph_progress,
    glyph_strokes,
    stroke_width,
)

W, H = 480, 360
FULL = H / 2


def test_glyph_progress_clamped():
    assert glyph_progress(FULL, H) == 1.0
    assert glyph_progress(FULL * 3, H) == 1.0
    assert glyph_progress(-5, H) == 0.0
    assert glyph_progress(FULL / 2, H) == pytest.approx(0.5)


def test_stroke_width_range():
    assert stroke_width(0.0) == 2
    assert stroke_width(1.0) == 6
    widths = [stroke_width(p / 10) for p in range(11)]
    assert widths == sorted(widths)


def test_no_strokes_before_growth():
    assert glyph_strokes(W, H, 0) == []


@pytest.mark.parametrize("progress, count", [(0.1, 1), (0.3, 2), (0.6, 3), (1.0, 3)])
def test_stroke_count_by_progress(progress, count):
    assert len(glyph_strokes(W, H, progress * FULL)) == count


def test_full_glyph_is_symmetric():
    left, right, bar = glyph_strokes(W, H, FULL)
    assert left.start == right.start
    assert left.start[0] == W / 2
    assert left.end[1] == right.end[1]
    assert left.end[0] + right.end[0] == pytest.approx(W)
    assert left.control[0] + right.control[0] == pytest.approx(W)
    assert bar.control is None
    assert bar.start[1] == bar.end[1]
    assert bar.start[0] + bar.end[0] == pytest.approx(W)


def test_partial_left_leg_shorter_than_full():
    partial = glyph_strokes(W, H, 0.2 * FULL)[0]
    full = glyph_strokes(W, H, FULL)[0]
    assert partial.start == full.start
    assert full.start[1] < partial.end[1] < full.end[1]
    assert isinstance(partial, Stroke)


def test_state_before_start():
    anim = SplashAnimation()
    assert anim.state_at(500) == (0.0, 0.0)
    assert anim.finished_at(10_000) is False


def test_state_over_time():
    anim = SplashAnimation(W, H)
    anim.start(900)
    assert anim.state_at(0) == (0.0, 0.0)
    assert anim.state_at(900) == (FULL, 1.0)
    assert anim.state_at(5000) == (FULL, 1.0)
    assert anim.state_at(630)[1] == 1.0
    heights = [anim.state_at(t)[0] for t in range(0, 901, 50)]
    assert heights == sorted(heights)
    assert anim.state_at(450)[0] > FULL / 2


def test_finished_at():
    anim = SplashAnimation()
    anim.start(900)
    assert anim.finished_at(899) is False
    assert anim.finished_at(900) is True


def test_zero_duration_jumps_to_end():
    anim = SplashAnimation(W, H)
    anim.start(0)
    assert anim.state_at(0) == (FULL, 1.0)
    assert anim.finished_at(0) is True


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        SplashAnimation().start(-1)