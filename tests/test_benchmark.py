"""Smoke test for the shapely comparison benchmark."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parents[1]))

from benchmark_shapely import benchmark_circles, benchmark_segments  # noqa: E402


def test_circle_benchmark_agrees_with_shapely():
    """Random circle pairs stay close to shapely's polygon results."""
    report = benchmark_circles(200)
    assert report['overlaps'] > 0
    assert report['max_area_err'] < 1e-2
    assert report['max_centroid_err'] < 1e-2


def test_segment_benchmark_agrees_with_shapely():
    """Random segment pairs cross where shapely says they do."""
    report = benchmark_segments(200)
    assert report['crossings'] > 0
    assert report['mismatches'] == 0
    assert report['max_point_err'] == pytest.approx(0.0, abs=1e-9)
