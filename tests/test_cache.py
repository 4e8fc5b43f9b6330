import pytest

from chrome_palette.cache import TintCache
from chrome_palette.tint import compute_tint


def test_hit_returns_same_result():
    cache = TintCache()
    first = cache.compute(identifier="my-project", style="neon")
    second = cache.compute(identifier="my-project", style="neon")

    assert first is second
    assert first == compute_tint(identifier="my-project", style="neon")
    assert (cache.hits, cache.misses) == (1, 1)


def test_options_are_part_of_the_key():
    cache = TintCache()
    a = cache.compute(base_hue=10)
    b = cache.compute(base_hue=10, harmony="triadic")
    assert a is not b
    assert cache.misses == 2
    assert len(cache) == 2


def test_mapping_options_are_hashable():
    cache = TintCache()
    theme_colors = {"editor.background": "#1E1E1E", "editor.foreground": "#D4D4D4"}
    cache.compute(base_hue=10, theme_colors=theme_colors, target_blend_factors={"sideBar": 0.2})
    cache.compute(base_hue=10, theme_colors=dict(theme_colors), target_blend_factors={"sideBar": 0.2})
    cache.compute(base_hue=10, targets=["titleBar"])
    cache.compute(base_hue=10, targets=("titleBar",))
    assert cache.hits == 2
    assert cache.misses == 2


def test_least_recently_used_is_evicted():
    cache = TintCache(maxsize=2)
    cache.compute(base_hue=1)
    cache.compute(base_hue=2)
    cache.compute(base_hue=1)
    cache.compute(base_hue=3)
    assert len(cache) == 2

    cache.compute(base_hue=1)
    assert cache.hits == 2
    cache.compute(base_hue=2)
    assert cache.misses == 4


def test_clear():
    cache = TintCache()
    cache.compute(base_hue=1)
    cache.compute(base_hue=1)
    cache.clear()
    assert len(cache) == 0
    assert (cache.hits, cache.misses) == (0, 0)


def test_errors_are_not_cached():
    cache = TintCache()
    with pytest.raises(ValueError):
        cache.compute(base_hue=1, style="glossy")
    assert len(cache) == 0


def test_invalid_maxsize():
    with pytest.raises(ValueError):
        TintCache(maxsize=0)
