import pytest

from drop_mixer.naming import HUE_BANDS, hue_band, name_color


def test_extremes():
    assert name_color(0, 0.8, 0.02) == "black"
    assert name_color(200, 0.8, 0.95) == "white"
    assert name_color(200, 0.0, 0.94) == "light gray"


@pytest.mark.parametrize(
    "l, expected",
    [(0.2, "dark gray"), (0.31, "dark gray"), (0.32, "gray"), (0.5, "gray"),
     (0.78, "gray"), (0.79, "light gray")],
)
def test_gray_tiers(l, expected):
    assert name_color(120, 0.05, l) == expected


def test_specials():
    assert name_color(30, 0.5, 0.4) == "brown"
    assert name_color(30, 0.5, 0.58) == "salmon"
    assert name_color(70, 0.3, 0.4) == "khaki"
    assert name_color(70, 0.3, 0.5) == "olive"
    assert name_color(70, 0.3, 0.6) == "olive"
    assert name_color(70, 0.3, 0.61) == "lime"
    assert name_color(355, 0.6, 0.3) == "burgundy"
    assert name_color(5, 0.6, 0.3) == "burgundy"
    assert name_color(340, 0.6, 0.4) == "wine"
    assert name_color(340, 0.6, 0.42) == "pink"


@pytest.mark.parametrize(
    "h, expected",
    [
        (0, "red"),
        (9.99, "red"),
        (10, "vermilion"),
        (39.9, "orange"),
        (40, "peach"),
        (100, "green"),
        (186, "teal sky"),
        (185.9, "turquoise"),
        (200, "sky blue"),
        (216, "blue"),
        (280, "light purple"),
        (349.9, "pink"),
        (350, "red"),
        (-10, "red"),
    ],
)
def test_hue_bands(h, expected):
    assert name_color(h, 0.8, 0.6) == expected


def test_hue_table_covers_circle():
    assert len(HUE_BANDS) == 29  # 28 bands, red listed at both ends
    assert HUE_BANDS[-1][0] == 360
    bounds = [b for b, _ in HUE_BANDS]
    assert bounds == sorted(bounds)
    assert hue_band(359.999) == "red"


def test_prefix_and_suffix():
    assert name_color(216, 0.8, 0.92) == "very pale blue"
    assert name_color(216, 0.8, 0.85) == "pale blue"
    assert name_color(216, 0.8, 0.15) == "very deep blue"
    assert name_color(216, 0.8, 0.25) == "deep blue"
    assert name_color(216, 0.15, 0.5) == "blue (grayish)"
    assert name_color(216, 0.15, 0.85) == "pale blue (grayish)"
    assert name_color(216, 0.15, 0.92) == "very pale blue"
    assert name_color(216, 0.22, 0.5) == "blue"


def test_korean_catalog():
    assert name_color(0, 0.8, 0.5, lang="ko") == "빨강"
    assert name_color(216, 0.15, 0.85, lang="ko") == "연한 파랑 (회색빛)"
    with pytest.raises(ValueError):
        name_color(0, 0.8, 0.5, lang="fr")


@pytest.mark.parametrize(
    "h, s, l, expected",
    [
        (15, 0.5, 0.4, "brown"),
        (14.9, 0.5, 0.4, "vermilion"),
        (49.9, 0.5, 0.4, "brown"),
        (50, 0.5, 0.4, "yellow"),
        (55, 0.3, 0.4, "khaki"),
        (54.9, 0.3, 0.4, "yellow"),
        (94.9, 0.3, 0.4, "khaki"),
        (95, 0.3, 0.4, "green"),
        (330, 0.6, 0.4, "wine"),
        (329.9, 0.6, 0.4, "fuchsia"),
        (0, 0.6, 0.3499, "burgundy"),
        (0, 0.6, 0.35, "red"),
    ],
)
def test_special_window_edges(h, s, l, expected):
    assert name_color(h, s, l) == expected


@pytest.mark.parametrize(
    "l, expected",
    [
        (0.1799, "very deep blue"),
        (0.18, "deep blue (grayish)"),
        (0.9, "pale blue (grayish)"),
        (0.9001, "very pale blue"),
    ],
)
def test_grayish_suffix_edges(l, expected):
    assert name_color(216, 0.15, l) == expected
