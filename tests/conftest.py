from typing import Dict, List, Optional, Tuple

import pytest

from pose_types import NUM_LANDMARKS, Landmark2D, PoseLandmark

STANDING: Dict[int, Tuple[float, float]] = {
    PoseLandmark.LEFT_SHOULDER: (0.55, 0.3),
    PoseLandmark.RIGHT_SHOULDER: (0.45, 0.3),
    PoseLandmark.LEFT_ELBOW: (0.57, 0.45),
    PoseLandmark.RIGHT_ELBOW: (0.43, 0.45),
    PoseLandmark.LEFT_WRIST: (0.58, 0.6),
    PoseLandmark.RIGHT_WRIST: (0.42, 0.6),
    PoseLandmark.LEFT_HIP: (0.53, 0.6),
    PoseLandmark.RIGHT_HIP: (0.47, 0.6),
    PoseLandmark.LEFT_KNEE: (0.53, 0.8),
    PoseLandmark.RIGHT_KNEE: (0.47, 0.8),
    PoseLandmark.LEFT_ANKLE: (0.53, 0.95),
    PoseLandmark.RIGHT_ANKLE: (0.47, 0.95),
    PoseLandmark.LEFT_FOOT_INDEX: (0.58, 0.97),
    PoseLandmark.RIGHT_FOOT_INDEX: (0.42, 0.97),
}


def build_frame(points: Dict[int, Tuple[float, float]]) -> List[Optional[Landmark2D]]:
    frame: List[Optional[Landmark2D]] = [None] * NUM_LANDMARKS
    for index, (x, y) in points.items():
        frame[index] = Landmark2D(x, y, 0.0, 0.99)
    return frame


@pytest.fixture
def standing_points() -> Dict[int, Tuple[float, float]]:
    return dict(STANDING)


@pytest.fixture
def make_frame():
    return build_frame
