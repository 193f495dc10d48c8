import pytest

from barchart.charting.errors import DataError
from barchart.charting.fields import MISSING
from barchart.charting.scales import build_band_scale, build_linear_scale


def test_band_domain_is_distinct_first_seen():
    band = build_band_scale(["B", "A", "B", "C", "A"], 300)
    assert band.domain == ("B", "A", "C")
    assert len(set(band.domain)) == len(band.domain)


def test_band_partition_without_overflow():
    band = build_band_scale(["A", "B", "C"], 280)
    assert band.bandwidth == pytest.approx(93.333, abs=1e-3)
    assert band.bandwidth * len(band.domain) <= 280 + 1e-9
    edges = [band(v) for v in band.domain]
    assert edges[0] == 0
    # contiguous, monotonic bands
    for left, right in zip(edges, edges[1:]):
        assert right - left == pytest.approx(band.bandwidth)


def test_band_rounded_edges():
    band = build_band_scale(["A", "B", "C"], 280, round=True)
    assert band.bandwidth == 93
    assert [band(v) for v in band.domain] == [1, 94, 187]
    assert band.bandwidth * 3 <= 280


def test_band_ticks_centered():
    band = build_band_scale(["x", "y"], 200)
    ticks = band.ticks()
    assert [t.position for t in ticks] == [50, 150]
    assert [t.label for t in ticks] == ["x", "y"]


def test_band_missing_value_is_degenerate_entry():
    band = build_band_scale(["A", MISSING], 100)
    assert band.domain == ("A", MISSING)
    assert band(MISSING) == 50
    assert band.ticks()[1].label == ""


def test_band_unknown_value_raises():
    band = build_band_scale(["A"], 100)
    with pytest.raises(KeyError):
        band("Z")


def test_band_empty_raises():
    with pytest.raises(DataError):
        build_band_scale([], 100)


def test_linear_domain_anchored_at_zero():
    linear = build_linear_scale([-5, 10, 3], 280)
    assert linear.domain == (0.0, 10.0)
    assert linear(0) == 280
    assert linear(10) == 0


def test_linear_maps_max_to_top():
    linear = build_linear_scale([10, 20, 5], 280)
    assert linear.domain == (0.0, 20.0)
    assert linear(20) == 0
    assert linear(5) == 210
    assert linear.invert(210) == pytest.approx(5)


def test_linear_ignores_non_numeric_values():
    linear = build_linear_scale([MISSING, "oops", 4, None], 100)
    assert linear.domain == (0.0, 4.0)


@pytest.mark.parametrize("values", [[], [MISSING, "x"], [0, 0], [-3, -1]])
def test_linear_without_positive_max_raises(values):
    with pytest.raises(DataError):
        build_linear_scale(values, 100)


def test_linear_rounding():
    linear = build_linear_scale([30], 280, round=True)
    assert linear(10) == 187


def test_linear_ticks_cover_domain_evenly():
    linear = build_linear_scale([10, 20, 5], 280)
    values = linear.tick_values()
    assert values[0] == 0
    assert values[-1] <= 20
    steps = {round(b - a, 9) for a, b in zip(values, values[1:])}
    assert len(steps) == 1
    assert 20 - values[-1] < steps.pop()
    ticks = linear.ticks()
    assert ticks[0].position == 280
    assert ticks[0].label == "0"


def test_linear_skips_infinite_values():
    linear = build_linear_scale([10, float("inf"), float("-inf"), 5], 280)
    assert linear.domain == (0.0, 10.0)
    assert linear(10) == 0


@pytest.mark.parametrize("values", [[float("inf")], [float("-inf"), float("nan")]])
def test_linear_with_only_non_finite_values_raises(values):
    with pytest.raises(DataError):
        build_linear_scale(values, 100)
