"""
Tests for arc path descriptor generation and parsing
"""
import math
import re

import pytest

from curvedtext.model.geometry_primitives import ArcPath, Point, SweepDirection
from curvedtext.model.geometry_utils import (
    arc_sweep_angle,
    build_arc_path,
    generate_arc_path,
    polar_to_cartesian,
)
from .conftest import sample_angles, sample_radii

TOLERANCE = 1e-3
NUMBER = r"-?[\d.]+(?:e[+-]?\d+)?"


def arc_path_regex(sweep_flag: int) -> re.Pattern:
    return re.compile(
        rf"^M\s+{NUMBER}\s+{NUMBER}\s+A\s+{NUMBER}\s+{NUMBER}\s+0\s+[01]\s+{sweep_flag}\s+{NUMBER}\s+{NUMBER}$"
    )


def tokens(path: str) -> list[str]:
    return path.split()


class TestSweepFlag:

    def test_counter_clockwise_paths_have_sweep_zero(self, rng, center):
        pattern = arc_path_regex(0)
        for radius, start, end in zip(sample_radii(rng), sample_angles(rng), sample_angles(rng)):
            path = generate_arc_path(center, int(radius), int(start), int(end), False)
            assert pattern.match(path), path
            assert tokens(path)[8] == "0"

    def test_clockwise_paths_have_sweep_one(self, rng, center):
        pattern = arc_path_regex(1)
        for radius, start, end in zip(sample_radii(rng), sample_angles(rng), sample_angles(rng)):
            path = generate_arc_path(center, int(radius), int(start), int(end), True)
            assert pattern.match(path), path
            assert tokens(path)[8] == "1"

    def test_accepts_sweep_direction(self, center):
        cw = generate_arc_path(center, 80, 10, 170, SweepDirection.CLOCKWISE)
        ccw = generate_arc_path(center, 80, 10, 170, SweepDirection.COUNTER_CLOCKWISE)
        assert tokens(cw)[8] == "1"
        assert tokens(ccw)[8] == "0"

    def test_counter_clockwise_example(self, center):
        path = generate_arc_path(center, 80, 10, 170, False)
        assert tokens(path)[8] == "0"


class TestDescriptorLayout:

    def test_radius_and_rotation_tokens(self, center):
        t = tokens(generate_arc_path(center, 80, 10, 170, True))
        assert t[0] == "M"
        assert t[3] == "A"
        assert float(t[4]) == float(t[5]) == 80.0
        assert t[6] == "0"

    def test_start_point_round_trips(self, rng, center):
        for radius, start, end in zip(sample_radii(rng), sample_angles(rng), sample_angles(rng)):
            clockwise = bool(rng.integers(0, 2))
            t = tokens(generate_arc_path(center, int(radius), int(start), int(end), clockwise))
            expected = polar_to_cartesian(center, int(radius), int(start))
            assert abs(float(t[1]) - expected.x) < TOLERANCE
            assert abs(float(t[2]) - expected.y) < TOLERANCE

    def test_end_point_round_trips(self, rng, center):
        for radius, start, end in zip(sample_radii(rng), sample_angles(rng), sample_angles(rng)):
            t = tokens(generate_arc_path(center, int(radius), int(start), int(end), True))
            expected = polar_to_cartesian(center, int(radius), int(end))
            assert abs(float(t[9]) - expected.x) < TOLERANCE
            assert abs(float(t[10]) - expected.y) < TOLERANCE

    def test_exact_output(self):
        path = generate_arc_path(Point(0.0, 0.0), 2, 0, 180, True)
        # sin(pi) is not exactly zero, so only the stable tokens are pinned
        assert path.startswith("M 2.0 0.0 A 2.0 2.0 0 0 1 -2.0 ")


class TestLargeArcFlag:

    @pytest.mark.parametrize("start, end, clockwise, large", [
        (10, 170, True, 0),
        (10, 170, False, 1),
        (210, 150, False, 0),
        (-30, 30, True, 0),
        (30, -30, True, 1),
        (0, 180, True, 0),
        (0, 181, True, 1),
        (0, 0, True, 0),
        (0, 360, True, 0),
    ])
    def test_known_cases(self, center, start, end, clockwise, large):
        t = tokens(generate_arc_path(center, 80, start, end, clockwise))
        assert t[7] == str(large)

    def test_flag_follows_span_in_sweep_direction(self, rng, center):
        for start, end in zip(sample_angles(rng), sample_angles(rng)):
            for clockwise in (True, False):
                t = tokens(generate_arc_path(center, 80, int(start), int(end), clockwise))
                span = arc_sweep_angle(int(start), int(end), clockwise)
                assert t[7] == ("1" if span > 180 else "0")

    def test_opposite_directions_pick_complementary_arcs(self, rng, center):
        for start, end in zip(sample_angles(rng), sample_angles(rng)):
            span = (int(end) - int(start)) % 360
            if span in (0, 180):
                continue
            cw = tokens(generate_arc_path(center, 80, int(start), int(end), True))[7]
            ccw = tokens(generate_arc_path(center, 80, int(start), int(end), False))[7]
            assert {cw, ccw} == {"0", "1"}


class TestArcPathValue:

    def test_parse_round_trip(self, center):
        arc = build_arc_path(center, 90, 210, 150, False)
        parsed = ArcPath.parse(str(arc))
        assert parsed == arc

    def test_generate_matches_build(self, center):
        assert generate_arc_path(center, 90, -30, 30, True) == build_arc_path(center, 90, -30, 30, True).to_descriptor()

    def test_parse_reads_scientific_notation(self):
        parsed = ArcPath.parse("M 1e-05 -2.5e+02 A 10 10 0 1 0 3 4")
        assert parsed.start == Point(1e-05, -250.0)
        assert parsed.end == Point(3.0, 4.0)
        assert parsed.large_arc is True
        assert parsed.sweep is SweepDirection.COUNTER_CLOCKWISE

    @pytest.mark.parametrize("descriptor", [
        "",
        "M 0 0 L 1 1",
        "M 0 0 A 1 1 0 0 1 2",
        "M 0 0 A 1 2 0 0 1 2 2",
        "M 0 0 A 1 1 45 0 1 2 2",
        "M 0 0 A 1 1 0 2 1 2 2",
        "L 0 0 A 1 1 0 0 1 2 2",
    ])
    def test_parse_rejects_malformed(self, descriptor):
        with pytest.raises(ValueError):
            ArcPath.parse(descriptor)

    def test_nan_propagates_without_raising(self, center):
        t = tokens(generate_arc_path(center, 80, float("nan"), 90, True))
        assert math.isnan(float(t[1]))
        assert math.isnan(float(t[2]))
        assert t[7] == "0"
