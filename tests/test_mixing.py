import numpy as np
import pytest

from drop_mixer.mixing import EMPTY_HEX, mix, mix_counts
from drop_mixer.pigments import PIGMENTS, drops_vector, weights_from_vector


def test_empty_mix_is_canvas_gray():
    assert mix({}).hex == EMPTY_HEX == "#F5F5F5"
    zero = mix(dict.fromkeys(["red", "yellow", "blue", "white", "black"], 0))
    assert zero.hex == "#F5F5F5"
    assert zero.rgb == (245, 245, 245)


def test_single_pigment_reproduces_itself():
    for p in PIGMENTS:
        assert mix({p.key: 1}).hex == p.hex
        assert mix({p.key: 5}).hex == p.hex


def test_achromatic_only_stays_gray():
    for white, black in [(1, 1), (3, 5), (7, 1), (0, 4), (2, 0)]:
        c = mix({"white": white, "black": black})
        assert c.hsl[1] == 0
        assert c.rgb[0] == c.rgb[1] == c.rgb[2]
    assert mix({"white": 3, "black": 5}).hex == "#606060"


def test_blue_plus_white_is_sky_blue():
    blue = mix({"blue": 1})
    c = mix({"blue": 1, "white": 1})
    h, s, l = c.hsl
    assert h == pytest.approx(216.0)
    assert s == pytest.approx(0.5)
    assert l == pytest.approx(0.75)
    assert l > blue.hsl[2]
    assert c.hex == "#9FB9DF"


def test_red_plus_yellow_hue_is_circular_mean():
    h, s, l = mix({"red": 1, "yellow": 1}).hsl
    assert h == pytest.approx(30.0)
    assert s == pytest.approx(1.0)
    assert l == pytest.approx(0.5)


def test_hue_wraps_to_positive_degrees():
    h, _, _ = mix({"red": 3, "blue": 1}).hsl
    assert 0 <= h < 360


def test_deterministic():
    w = {"red": 2, "yellow": 1, "blue": 3, "white": 1, "black": 1}
    assert mix(w) == mix(dict(reversed(list(w.items()))))


def test_batch_rows_match_single_mix():
    rows = np.array(
        [
            [1, 0, 0, 0, 0],
            [0, 1, 1, 0, 0],
            [2, 1, 3, 1, 1],
            [0, 0, 1, 1, 0],
            [0, 0, 0, 2, 5],
        ]
    )
    rgb, hsl = mix_counts(rows)
    for i, row in enumerate(rows):
        single = mix(weights_from_vector(row))
        assert tuple(int(v) for v in rgb[i]) == single.rgb
        assert tuple(hsl[i]) == pytest.approx(single.hsl)


def test_drops_vector_boundary():
    assert drops_vector({"blue": 2}).tolist() == [0, 0, 2, 0, 0]
    with pytest.raises(ValueError):
        drops_vector({"green": 1})
    with pytest.raises(ValueError):
        drops_vector({"red": -1})
    with pytest.raises(ValueError):
        drops_vector({"red": 1.5})
    with pytest.raises(ValueError):
        drops_vector({"red": True})


def test_drops_vector_rejects_counts_beyond_int64():
    with pytest.raises(ValueError):
        drops_vector({"red": 2**63})
    assert mix({"red": 2**62}).hex == "#FF0000"
