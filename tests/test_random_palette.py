from chromind.colorspace import from_rgb, parse_hex
from chromind.random_palette import random_palette, random_plan
from chromind.rng import DeterministicRNG, random_int


def test_seeded_palette_repeats():
    first = random_palette(5, seed=42)
    assert len(first) == 5
    assert random_palette(5, seed=42) == first
    assert all(parse_hex(c) == c for c in first)


def test_unseeded_palettes_differ():
    assert random_palette(5) != random_palette(5)


def test_draw_order_is_rgb_left_to_right():
    rng = DeterministicRNG(42)
    expected = []
    for _ in range(4):
        r = random_int(0, 255, rng)
        g = random_int(0, 255, rng)
        b = random_int(0, 255, rng)
        expected.append(from_rgb(r, g, b))
    assert random_palette(4, seed=42) == expected


def test_longer_palette_extends_shorter():
    assert random_palette(8, seed=7)[:3] == random_palette(3, seed=7)


def test_empty_sizes():
    assert random_palette(0, seed=1) == []
    assert random_palette(-2, seed=1) == []


def test_plan_labels():
    plan = random_plan(5, seed=42)
    assert plan.title == "Random palette"
    assert plan.subtitle == "5 colors · seed 42"
    assert [e.role for e in plan.colors] == [f"color {i}" for i in range(1, 6)]
    assert plan.hexes() == random_palette(5, seed=42)
    assert random_plan(3).subtitle == "3 colors"
