from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from geometry import angle_from_vertical, joint_angle, midpoint
from joint_metrics.types import AngleValue
from joint_metrics.validation import point
from pose_types import LandmarkFrame, PoseLandmark

TRUNK = "Trunk_Angle"


@dataclass(frozen=True)
class JointChain:
    name: str
    proximal: int
    vertex: int
    distal: int


def _side_chains(side: str) -> List[JointChain]:
    prefix = side.upper()

    def idx(joint: str) -> int:
        return getattr(PoseLandmark, f"{prefix}_{joint}")

    label = side.capitalize()
    return [
        JointChain(f"{label}_Shoulder_Angle", idx("HIP"), idx("SHOULDER"), idx("ELBOW")),
        JointChain(f"{label}_Elbow_Angle", idx("SHOULDER"), idx("ELBOW"), idx("WRIST")),
        JointChain(f"{label}_Hip_Angle", idx("SHOULDER"), idx("HIP"), idx("KNEE")),
        JointChain(f"{label}_Knee_Angle", idx("HIP"), idx("KNEE"), idx("ANKLE")),
        JointChain(f"{label}_Ankle_Angle", idx("KNEE"), idx("ANKLE"), idx("FOOT_INDEX")),
    ]


JOINT_CHAINS: List[JointChain] = _side_chains("left") + _side_chains("right")

# Landmarks whose markers carry feedback for each angle.
ANGLE_VERTICES: Dict[str, Tuple[int, ...]] = {
    TRUNK: (PoseLandmark.LEFT_HIP, PoseLandmark.RIGHT_HIP),
}
ANGLE_VERTICES.update({chain.name: (chain.vertex,) for chain in JOINT_CHAINS})

ANGLE_NAMES: List[str] = [TRUNK] + [chain.name for chain in JOINT_CHAINS]


def trunk_angle(frame: LandmarkFrame) -> Optional[float]:
    mid_shoulder = midpoint(
        point(frame, PoseLandmark.LEFT_SHOULDER),
        point(frame, PoseLandmark.RIGHT_SHOULDER),
    )
    mid_hip = midpoint(
        point(frame, PoseLandmark.LEFT_HIP),
        point(frame, PoseLandmark.RIGHT_HIP),
    )
    return angle_from_vertical(mid_shoulder, mid_hip)


def compute_angles(frame: Optional[LandmarkFrame]) -> Optional[Dict[str, AngleValue]]:
    """
    Derive every named angle from a validated frame.

    Each angle stands alone: a missing landmark only makes the angles that
    need it unavailable. Returns None when there is no frame at all.
    """
    if frame is None:
        return None
    angles: Dict[str, AngleValue] = {TRUNK: AngleValue.of(trunk_angle(frame))}
    for chain in JOINT_CHAINS:
        degrees = joint_angle(
            point(frame, chain.proximal),
            point(frame, chain.vertex),
            point(frame, chain.distal),
        )
        angles[chain.name] = AngleValue.of(degrees)
    return angles


def display_name(angle_name: str) -> str:
    return angle_name.replace("_", " ")
