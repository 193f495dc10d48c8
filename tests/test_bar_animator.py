import pytest

from barchart.charting.bars import BarAnimator
from barchart.charting.scales import build_band_scale, build_linear_scale
from barchart.charting.types import PlottingArea


@pytest.fixture
def setup(rows):
    area = PlottingArea(chart_width=280, chart_height=280)
    band = build_band_scale([r["cat"] for r in rows], area.chart_width)
    linear = build_linear_scale([r["val"] for r in rows], area.chart_height)
    return area, band, linear


def test_enter_state_at_baseline(setup, rows, canvas, scheduler):
    area, band, linear = setup
    bars, _ = BarAnimator(880).animate(canvas, scheduler, rows, "cat", "val", band, linear, area)
    assert len(bars) == len(rows)
    entered = [c.arg for c in canvas.calls if c.op == "add_bar"]
    assert [b.index for b in entered] == [0, 1, 2]
    for bar in entered:
        assert bar.y == 280
        assert bar.height == 0
        assert bar.width == pytest.approx(280 / 3)
    assert [b.x for b in entered] == [band("A"), band("B"), band("C")]
    # enter frame is pushed before any transition frame
    assert canvas.frames[0] == [(b.x, 280, b.width, 0) for b in entered]
    first_update = canvas.ops().index("update_bar")
    assert canvas.ops()[:first_update].count("add_bar") == 3


def test_transition_is_linear_over_duration(setup, rows, canvas, scheduler):
    area, band, linear = setup
    bars, transition = BarAnimator(1000).animate(canvas, scheduler, rows, "cat", "val", band, linear, area)
    assert transition.duration_ms == 1000
    scheduler.advance(500)
    b = bars[1]  # val 20 -> y 0
    assert b.y == pytest.approx(140)
    assert b.height == pytest.approx(140)
    scheduler.advance(500)
    assert (b.y, b.height) == (0, 280)
    c = bars[2]
    assert (c.y, c.height) == (210, 70)
    assert transition.finished


def test_non_numeric_value_stays_on_baseline(canvas, scheduler):
    rows = [{"cat": "A", "val": 4}, {"cat": "B"}, {"cat": "C", "val": "n/a"}]
    area = PlottingArea(100, 100)
    band = build_band_scale([r["cat"] for r in rows], 100)
    linear = build_linear_scale([r.get("val") for r in rows], 100)
    bars, _ = BarAnimator(10).animate(canvas, scheduler, rows, "cat", "val", band, linear, area)
    scheduler.finish_all()
    assert [(b.y, b.height) for b in bars] == [(0, 100), (100, 0), (100, 0)]


def test_negative_value_keeps_formula_height(canvas, scheduler):
    rows = [{"cat": "A", "val": -5}, {"cat": "B", "val": 10}]
    area = PlottingArea(100, 100)
    band = build_band_scale(["A", "B"], 100)
    linear = build_linear_scale([-5, 10], 100)
    bars, _ = BarAnimator(0).animate(canvas, scheduler, rows, "cat", "val", band, linear, area)
    assert (bars[0].y, bars[0].height) == (150, -50)


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        BarAnimator(-5)
