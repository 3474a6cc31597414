#!/usr/bin/env python3
"""
Shapely comparison benchmark for overlap2d.
Times circle-circle overlap and segment-segment intersection against
the equivalent Shapely operations, and reports how far the results drift.

Shapely approximates circles with polygons, so its areas and centroids
are only references; the closed-form results of overlap2d are exact.

Usage:
    python benchmark_shapely.py [count]
    python benchmark_shapely.py 2000
"""

import sys
import time

import numpy as np

from overlap2d import Circle, LineSegment, Point, intersect
from overlap2d.interop import to_shapely


def random_circle_pairs(count: int, seed: int = 0) -> list[tuple[Circle, Circle]]:
    """Circle pairs with centers in [0, 10)^2 and radii in [0.5, 3)."""
    rng = np.random.default_rng(seed)
    centers = rng.uniform(0.0, 10.0, size=(count, 2, 2))
    radii = rng.uniform(0.5, 3.0, size=(count, 2))
    return [
        (
            Circle(Point.of(c[0]), float(r[0])),
            Circle(Point.of(c[1]), float(r[1])),
        )
        for c, r in zip(centers, radii)
    ]


def random_segment_pairs(count: int, seed: int = 0) -> list[tuple[LineSegment, LineSegment]]:
    """Segment pairs with endpoints in [0, 10)^2."""
    rng = np.random.default_rng(seed)
    ends = rng.uniform(0.0, 10.0, size=(count, 2, 2, 2))
    return [
        (
            LineSegment(Point.of(e[0][0]), Point.of(e[0][1])),
            LineSegment(Point.of(e[1][0]), Point.of(e[1][1])),
        )
        for e in ends
    ]


def benchmark_circles(count: int, quad_segs: int = 64) -> dict:
    pairs = random_circle_pairs(count)

    start = time.perf_counter()
    ours = [intersect(a, b) for a, b in pairs]
    ours_time = time.perf_counter() - start

    shapes = [(to_shapely(a, quad_segs), to_shapely(b, quad_segs)) for a, b in pairs]
    start = time.perf_counter()
    theirs = [sa.intersection(sb) for sa, sb in shapes]
    theirs_time = time.perf_counter() - start

    max_area_err = 0.0
    max_centroid_err = 0.0
    for clump, geom in zip(ours, theirs):
        if clump is None or geom.is_empty:
            continue
        max_area_err = max(max_area_err, abs(clump.area - geom.area))
        c = geom.centroid
        max_centroid_err = max(max_centroid_err, np.hypot(clump.centroid.x - c.x, clump.centroid.y - c.y))

    return {
        'overlaps': sum(1 for clump in ours if clump is not None),
        'ours_time': ours_time,
        'theirs_time': theirs_time,
        'max_area_err': max_area_err,
        'max_centroid_err': max_centroid_err,
    }


def benchmark_segments(count: int) -> dict:
    pairs = random_segment_pairs(count)

    start = time.perf_counter()
    ours = [intersect(a, b) for a, b in pairs]
    ours_time = time.perf_counter() - start

    shapes = [(to_shapely(a), to_shapely(b)) for a, b in pairs]
    start = time.perf_counter()
    theirs = [sa.intersection(sb) for sa, sb in shapes]
    theirs_time = time.perf_counter() - start

    mismatches = 0
    max_point_err = 0.0
    for point, geom in zip(ours, theirs):
        if (point is None) != geom.is_empty:
            mismatches += 1
            continue
        if point is not None and geom.geom_type == 'Point':
            max_point_err = max(max_point_err, np.hypot(point.x - geom.x, point.y - geom.y))

    return {
        'crossings': sum(1 for point in ours if point is not None),
        'ours_time': ours_time,
        'theirs_time': theirs_time,
        'mismatches': mismatches,
        'max_point_err': max_point_err,
    }


def run_benchmark(count: int):
    """Run both benchmarks and print a report."""
    print(f"Generating {count} random pairs per benchmark...")

    circles = benchmark_circles(count)
    segments = benchmark_segments(count)

    print()
    print("=" * 50)
    print("RESULTS (overlap2d vs Shapely)")
    print("=" * 50)
    print(f"Circle pairs overlapping: {circles['overlaps']}")
    print(f"  overlap2d time:         {circles['ours_time']*1000:.1f}ms")
    print(f"  Shapely time:           {circles['theirs_time']*1000:.1f}ms")
    print(f"  Max area err:           {circles['max_area_err']:.2e}")
    print(f"  Max centroid err:       {circles['max_centroid_err']:.2e}")
    print(f"Segment pairs crossing:   {segments['crossings']}")
    print(f"  overlap2d time:         {segments['ours_time']*1000:.1f}ms")
    print(f"  Shapely time:           {segments['theirs_time']*1000:.1f}ms")
    print(f"  Disagreements:          {segments['mismatches']}")
    print(f"  Max point err:          {segments['max_point_err']:.2e}")
    print("=" * 50)

    return circles, segments


if __name__ == "__main__":
    try:
        count = int(sys.argv[1]) if len(sys.argv) > 1 else 1000
    except ValueError:
        print(f"Error: count must be an integer, got {sys.argv[1]!r}")
        print("Usage: python benchmark_shapely.py [count]")
        sys.exit(1)

    run_benchmark(count)
