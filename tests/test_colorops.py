import pytest

from chromind.colorops import (
    DARK_TEXT,
    LIGHT_TEXT,
    adjust_lightness,
    choose_text_color,
    contrast_ratio,
    ensure_accent_contrast,
    is_light,
    relative_luminance,
    rotate_hue,
)
from chromind.colorspace import HSL, FormatError, hsl_to_hex, to_hsl, to_rgb

SAMPLES = ["#3366ff", "#ff8800", "#12ab34", "#7f1e9c", "#808080", "#000000", "#ffffff"]


def close(a, b, tol=1):
    ra, rb = to_rgb(a), to_rgb(b)
    return (
        abs(ra.r - rb.r) <= tol and abs(ra.g - rb.g) <= tol and abs(ra.b - rb.b) <= tol
    )


@pytest.mark.parametrize("hex_", SAMPLES)
def test_full_rotation_is_identity(hex_):
    assert close(rotate_hue(hex_, 360), hex_)
    assert close(rotate_hue(hex_, -720), hex_)


def test_rotate_primaries():
    assert rotate_hue("#ff0000", 120) == "#00ff00"
    assert close(rotate_hue("#ff0000", -120), "#0000ff")
    assert close(rotate_hue("#ff0000", 480), "#00ff00")


def test_rotate_gray_is_noop():
    assert rotate_hue("#808080", 90) == "#808080"


def test_adjust_lightness_clamps():
    assert adjust_lightness("#3366ff", 5) == "#ffffff"
    assert adjust_lightness("#3366ff", -5) == "#000000"
    assert adjust_lightness("#808080", 0.0) == "#808080"


def test_luminance_extremes():
    assert relative_luminance("#000000") == 0.0
    assert relative_luminance("#ffffff") == pytest.approx(1.0)


def test_contrast_ratio():
    assert contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)
    assert contrast_ratio("#3366ff", "#3366ff") == pytest.approx(1.0)
    assert contrast_ratio("#3366ff", "#ff8800") == contrast_ratio("#ff8800", "#3366ff")


def test_text_color():
    assert choose_text_color("#ffffff") == DARK_TEXT
    assert choose_text_color("#000000") == LIGHT_TEXT
    assert choose_text_color("#3366ff") == LIGHT_TEXT


def test_text_and_light_thresholds_are_separate():
    # luminance ≈ 0.571: dark text, yet not a "light" colour
    assert choose_text_color("#c7c7c7") == DARK_TEXT
    assert not is_light("#c7c7c7")
    assert is_light("#ffff00")
    assert not is_light("#808080")


@pytest.mark.parametrize("hex_", SAMPLES)
def test_accent_never_equals_base(hex_):
    assert ensure_accent_contrast(hex_, hex_) != hex_


def test_accent_kept_when_contrast_is_enough():
    assert ensure_accent_contrast("#000000", "#FFFFFF") == "#ffffff"


def test_accent_fallback_formula():
    base = "#3366ff"
    hsl = to_hsl(base)
    expected = hsl_to_hex(HSL((hsl.h + 0.5) % 1, max(0.6, 1 - hsl.s), 0.32))
    assert hsl.l > 0.5
    assert ensure_accent_contrast(base, base) == expected
    # low-contrast neighbour takes the same fallback
    assert ensure_accent_contrast(base, "#3367ff") == expected


def test_accent_rejects_bad_hex():
    with pytest.raises(FormatError):
        ensure_accent_contrast("#3366ff", "blue")
