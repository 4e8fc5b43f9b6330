import random
import string

import pytest

from chrome_palette.color.hash import compute_base_hue, hash_string
from chrome_palette.color.hue import apply_hue_offset, wrap_hue


def test_hash_string_snapshots():
    assert hash_string("") == 5381
    assert hash_string("my-project") == 1486417321
    assert hash_string("test") == 2087956275


def test_hash_string_fits_32_bits():
    value = hash_string("a fairly long workspace identifier " * 20)
    assert 0 <= value <= 0xFFFFFFFF


@pytest.mark.parametrize(
    "identifier, seed, expected",
    [
        ("my-project", 0, 1),
        ("my-project", 42, 26),
        ("my-project", -100, 40),
        ("project-a", 0, 276),
        ("project-b", 0, 279),
        ("test", 0, 195),
        ("", 0, 341),
    ],
)
def test_compute_base_hue_snapshots(identifier, seed, expected):
    assert compute_base_hue(identifier, seed) == expected


def test_seed_zero_is_default():
    assert compute_base_hue("my-project") == compute_base_hue("my-project", 0)


def test_compute_base_hue_is_deterministic():
    for identifier in ("alpha", "/home/user/src/app", "café", "日本語"):
        first = compute_base_hue(identifier, 7)
        assert first == compute_base_hue(identifier, 7)
        assert 0 <= first <= 359
        assert isinstance(first, int)


def test_different_identifiers_rarely_collide():
    rng = random.Random(1234)
    alphabet = string.ascii_lowercase + string.digits + "-_/"

    def identifier():
        return "".join(rng.choice(alphabet) for _ in range(12))

    samples = 2000
    collisions = sum(
        compute_base_hue(identifier()) == compute_base_hue(identifier()) for _ in range(samples)
    )
    assert collisions <= samples * 0.01


def test_wrap_hue():
    assert wrap_hue(-10) == 350
    assert wrap_hue(370) == 10
    assert wrap_hue(360) == 0
    assert wrap_hue(0) == 0
    assert wrap_hue(-720) == 0
    assert wrap_hue(359.5) == 359.5


def test_apply_hue_offset():
    assert apply_hue_offset(350, 20) == 10
    assert apply_hue_offset(10, -30) == 340
    assert apply_hue_offset(123) == 123
    assert apply_hue_offset(123, None) == 123
