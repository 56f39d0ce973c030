from fractions import Fraction
from types import SimpleNamespace

import numpy as np
import pytest

from joint_metrics.validation import validate_frame, validate_landmark
from pose_types import Landmark2D, PoseLandmark


def test_valid_landmark_returns_xy(make_frame):
    frame = make_frame({PoseLandmark.LEFT_KNEE: (0.25, 0.75)})
    assert validate_landmark(frame, PoseLandmark.LEFT_KNEE) == (0.25, 0.75)


@pytest.mark.parametrize("xy", [(0.0, 0.0), (1.0, 1.0), (0.0, 1.0)])
def test_unit_square_edges_are_valid(make_frame, xy):
    frame = make_frame({PoseLandmark.LEFT_HIP: xy})
    assert validate_landmark(frame, PoseLandmark.LEFT_HIP) == xy


@pytest.mark.parametrize("xy", [(1.2, 0.5), (-0.01, 0.5), (0.5, 1.0001), (0.5, -3.0)])
def test_out_of_frame_landmark_is_invalid(make_frame, xy):
    frame = make_frame({PoseLandmark.LEFT_HIP: xy})
    assert validate_landmark(frame, PoseLandmark.LEFT_HIP) is None


def test_absent_landmarks_are_invalid(make_frame):
    frame = make_frame({})
    assert validate_landmark(frame, PoseLandmark.LEFT_HIP) is None
    assert validate_landmark(frame, 99) is None
    assert validate_landmark(None, PoseLandmark.LEFT_HIP) is None
    assert validate_landmark([], 0) is None


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), "abc", None, True, 10**400, Fraction(10**400, 3)])
def test_non_numeric_coordinates_are_invalid(bad):
    frame = [SimpleNamespace(x=bad, y=0.5)]
    assert validate_landmark(frame, 0) is None


def test_validate_frame_keeps_only_valid_points(make_frame):
    raw = make_frame({PoseLandmark.LEFT_HIP: (0.5, 0.5), PoseLandmark.RIGHT_HIP: (1.5, 0.5)})
    frame = validate_frame(raw)
    assert set(frame) == {PoseLandmark.LEFT_HIP}
    assert frame[PoseLandmark.LEFT_HIP] == Landmark2D(0.5, 0.5, 0.0, 0.99)


@pytest.mark.parametrize("raw", [None, [], {}])
def test_validate_frame_without_detection(raw):
    assert validate_frame(raw) is None


def test_validate_frame_accepts_mappings_and_dicts():
    raw = {
        PoseLandmark.LEFT_KNEE: {"x": 0.4, "y": 0.6},
        PoseLandmark.LEFT_ANKLE: SimpleNamespace(x=0.4, y=0.9, z=-0.1, visibility=0.8),
        "bogus": {"x": 0.1, "y": 0.1},
    }
    frame = validate_frame(raw)
    assert set(frame) == {PoseLandmark.LEFT_KNEE, PoseLandmark.LEFT_ANKLE}
    assert frame[PoseLandmark.LEFT_KNEE].z is None
    assert frame[PoseLandmark.LEFT_ANKLE].z == pytest.approx(-0.1)


def test_visibility_gate_is_opt_in():
    raw = [Landmark2D(0.5, 0.5, None, 0.2), Landmark2D(0.5, 0.5, None, 0.9), Landmark2D(0.5, 0.5)]
    assert set(validate_frame(raw)) == {0, 1, 2}
    assert set(validate_frame(raw, min_visibility=0.5)) == {1, 2}


def test_unusable_input_is_treated_as_no_detection():
    assert validate_frame(42) is None


def test_array_frames_do_not_raise():
    coords = np.full((33, 2), 0.5)
    assert validate_landmark(coords, PoseLandmark.LEFT_SHOULDER) is None
    assert validate_landmark(np.empty((0, 2)), 0) is None
