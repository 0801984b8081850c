import numpy as np
import pytest

from drop_mixer.similarity import (
    MAX_DISTANCE,
    distance,
    distances,
    is_match,
    similarity_percent,
)


def test_distance_basics():
    assert distance((10, 20, 30), (10, 20, 30)) == 0
    assert distance((0, 0, 0), (3, 4, 0)) == 5
    assert distance((0, 0, 0), (255, 255, 255)) == pytest.approx(MAX_DISTANCE, abs=0.01)


def test_similarity_bounds():
    assert similarity_percent(0.0) == 100.0
    black_white = distance((0, 0, 0), (255, 255, 255))
    assert similarity_percent(black_white) == 0.0
    assert similarity_percent(1000.0) == 0.0


def test_similarity_monotonic():
    d = np.linspace(0, 450, 91)
    pct = similarity_percent(d)
    assert np.all((pct >= 0) & (pct <= 100))
    assert np.all(np.diff(pct) <= 0)


def test_vectorised_distances_match_scalar():
    rgb = np.array([[0, 0, 0], [255, 0, 0], [12, 200, 77], [245, 245, 245]])
    target = (76, 175, 80)
    d = distances(rgb, target)
    assert [float(x) for x in d] == [distance(row, target) for row in rgb.tolist()]


def test_is_match():
    assert is_match(90.0, 3)
    assert not is_match(89.99, 3)
    assert not is_match(100.0, 0)
    assert is_match(80.0, 1, threshold=75)
