from typing import Dict, FrozenSet, Iterable, Mapping

from joint_metrics.angles import ANGLE_VERTICES, TRUNK
from joint_metrics.types import Laterality, Severity

_LEFT = frozenset({TRUNK, "Left_Hip_Angle", "Left_Knee_Angle"})
_RIGHT = frozenset({TRUNK, "Right_Hip_Angle", "Right_Knee_Angle"})

ACTIVE_ANGLES: Dict[Laterality, FrozenSet[str]] = {
    Laterality.LEFT: _LEFT,
    Laterality.RIGHT: _RIGHT,
    Laterality.BOTH: _LEFT | _RIGHT,
}


def select_active(laterality: Laterality) -> FrozenSet[str]:
    return ACTIVE_ANGLES[laterality]


def feedback_landmarks(active: Iterable[str]) -> FrozenSet[int]:
    indices = set()
    for name in active:
        indices.update(ANGLE_VERTICES.get(name, ()))
    return frozenset(indices)


def landmark_severities(severities: Mapping[str, Severity]) -> Dict[int, Severity]:
    # A landmark shared by several angles shows the most concerning measurable
    # tier; unavailable only wins when nothing else was measured there.
    marked: Dict[int, Severity] = {}
    for name, severity in severities.items():
        for index in ANGLE_VERTICES.get(name, ()):
            current = marked.get(index)
            if current is None or current is Severity.UNAVAILABLE:
                marked[index] = severity
            elif severity is not Severity.UNAVAILABLE and severity > current:
                marked[index] = severity
    return marked
