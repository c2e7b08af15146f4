import pytest

from growcalc.core.stages import (STAGE_RANGES, Classification, VpdStatus,
                                  classify, color_for, get_stage_range,
                                  stage_display_name, status_css_class,
                                  status_label)

VEG = STAGE_RANGES["vegetative"]


def test_stage_ranges_ordered():
    for stage_range in STAGE_RANGES.values():
        assert stage_range.min < stage_range.optimal < stage_range.max


def test_unknown_stage():
    with pytest.raises(ValueError):
        get_stage_range("fruiting")


def test_display_name():
    assert stage_display_name("flowering") == "Flowering"


@pytest.mark.parametrize(
    "vpd,expected",
    [
        (0.3, VpdStatus.DANGEROUSLY_LOW),
        (0.7, VpdStatus.TOO_LOW),
        (1.0, VpdStatus.OPTIMAL),
        (1.4, VpdStatus.TOO_HIGH),
        (2.0, VpdStatus.DANGEROUSLY_HIGH),
    ],
)
def test_classify_categories(vpd, expected):
    assert classify(vpd, VEG).category == expected


def test_classify_boundaries_resolve_towards_optimal():
    assert classify(VEG.min, VEG).category == VpdStatus.OPTIMAL
    assert classify(VEG.max, VEG).category == VpdStatus.OPTIMAL
    assert classify(VEG.min - 0.2, VEG).category == VpdStatus.TOO_LOW
    assert classify(VEG.min - 0.2 - 1e-9, VEG).category == VpdStatus.DANGEROUSLY_LOW
    assert classify(VEG.max + 0.4, VEG).category == VpdStatus.TOO_HIGH
    assert classify(VEG.max + 0.4 + 1e-9, VEG).category == VpdStatus.DANGEROUSLY_HIGH


def test_perfect_vs_good():
    assert classify(1.09, VEG).perfect
    assert classify(0.95, VEG).perfect
    assert not classify(1.15, VEG).perfect
    assert not classify(0.5, VEG).perfect


def test_status_labels():
    assert status_label(classify(1.05, VEG), "vegetative") == "Perfect for Vegetative!"
    assert status_label(classify(1.15, VEG), "vegetative") == "Good for Vegetative"
    assert status_label(Classification(VpdStatus.DANGEROUSLY_LOW), "seedling") == "Dangerously Low - Risk of mold/mildew"
    assert status_label(Classification(VpdStatus.TOO_LOW), "seedling") == "Too Low - Slow transpiration"
    assert status_label(Classification(VpdStatus.TOO_HIGH), "seedling") == "Too High - Stress risk"
    assert status_label(Classification(VpdStatus.DANGEROUSLY_HIGH), "seedling") == "Dangerously High - Plant stress"


def test_css_classes():
    assert status_css_class(VpdStatus.DANGEROUSLY_LOW) == "status-danger"
    assert status_css_class(VpdStatus.DANGEROUSLY_HIGH) == "status-danger"
    assert status_css_class(VpdStatus.OPTIMAL) == "status-optimal"


def test_color_constant_ends():
    assert color_for(0.1, VEG) == (142, 68, 173)
    assert color_for(3.0, VEG) == (139, 0, 0)


def test_color_low_ramp_starts_at_purple_and_moves_to_green():
    assert color_for(VEG.min - 0.2, VEG) == (142, 68, 173)
    ramp = [color_for(v, VEG) for v in (0.62, 0.66, 0.70, 0.74, 0.78)]
    assert all(b[0] < a[0] and b[1] > a[1] and b[2] > a[2] for a, b in zip(ramp, ramp[1:]))


def test_color_peaks_at_optimal():
    assert color_for(VEG.optimal, VEG) == (39, 254, 96)
    assert color_for(VEG.min, VEG) == (59, 174, 116)
    assert color_for(VEG.max, VEG) == (59, 174, 116)


def test_color_high_ramp():
    assert color_for(1.4, VEG) == (242, 101, 29)
    r, g, b = color_for(1.2000001, VEG)
    assert (r, g, b) == (230, 125, 33)


def test_color_channels_are_ints():
    for v in (0.3, 0.7, 1.03, 1.33, 2.5):
        assert all(isinstance(c, int) for c in color_for(v, VEG))
