import pytest

from chrome_palette.harmony import (
    ALL_HARMONIES,
    DEFAULT_HARMONY,
    HARMONY_CONFIGS,
    HARMONY_DEFINITIONS,
    element_hue,
    offset_for,
)
from chrome_palette.theme.keys import ELEMENTS, TINT_TARGETS
from chrome_palette.tint import compute_tint


def test_every_harmony_covers_every_element():
    assert set(HARMONY_CONFIGS) == set(HARMONY_DEFINITIONS)
    for harmony in ALL_HARMONIES:
        for element in ELEMENTS:
            assert isinstance(offset_for(harmony, element), int)
        assert offset_for(harmony, "editor") == 0


def test_uniform_is_all_zero():
    assert DEFAULT_HARMONY == "uniform"
    assert all(offset == 0 for offset in HARMONY_CONFIGS["uniform"].values())


def test_harmony_order():
    assert ALL_HARMONIES[0] == "uniform"
    assert ALL_HARMONIES[-1] == "tetradic"
    assert len(ALL_HARMONIES) == 9


@pytest.mark.parametrize(
    "harmony, element, offset",
    [
        ("accent", "activityBar", 60),
        ("gradient", "titleBar", -30),
        ("analogous", "statusBar", 25),
        ("undercurrent", "statusBar", 180),
        ("duotone", "sideBar", 180),
        ("split-complementary", "titleBar", -150),
        ("triadic", "statusBar", 120),
        ("tetradic", "activityBar", 270),
    ],
)
def test_offsets(harmony, element, offset):
    assert offset_for(harmony, element) == offset


def test_unknown_harmony_or_element():
    with pytest.raises(ValueError):
        offset_for("rainbow", "titleBar")
    with pytest.raises(ValueError):
        offset_for("uniform", "minimap")


def test_element_hue_wraps():
    assert element_hue(350, "accent", "activityBar") == 50
    assert element_hue(10, "gradient", "titleBar") == 340


@pytest.mark.parametrize("harmony", [h for h in ALL_HARMONIES if h != "uniform"])
def test_harmony_changes_at_least_one_element(harmony):
    uniform = compute_tint(base_hue=200, harmony="uniform")
    other = compute_tint(base_hue=200, harmony=harmony)

    changed = [
        u.element
        for u, o in zip(uniform.keys, other.keys)
        if u.final_hex != o.final_hex
    ]
    assert changed
    assert set(changed) <= set(TINT_TARGETS)
