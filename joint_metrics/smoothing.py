"""
Two independent exponential moving averages run in series: one over landmark
coordinates, one over the derived angles.

Both stages seed from the raw value the first time a key appears and forget
everything when a frame has no detection, so tracking loss produces a step on
reacquisition rather than a blend with pre-gap history.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from joint_metrics.types import UNAVAILABLE, AngleValue
from pose_types import Landmark2D, LandmarkFrame


def _ema(alpha: float, raw: float, prev: float) -> float:
    return alpha * raw + (1.0 - alpha) * prev


def _smooth_landmark(alpha: float, raw: Landmark2D, prev: Landmark2D) -> Landmark2D:
    z = raw.z
    if raw.z is not None and prev.z is not None:
        z = _ema(alpha, raw.z, prev.z)
    return Landmark2D(
        _ema(alpha, raw.x, prev.x),
        _ema(alpha, raw.y, prev.y),
        z,
        raw.visibility,
    )


def smooth_landmarks(
    prev: Optional[Mapping[int, Landmark2D]],
    frame: Optional[Mapping[int, Landmark2D]],
    alpha: float,
) -> LandmarkFrame:
    if frame is None:
        return {}
    prev = prev or {}
    smoothed: LandmarkFrame = {}
    for index, raw in frame.items():
        last = prev.get(index)
        smoothed[index] = raw if last is None else _smooth_landmark(alpha, raw, last)
    return smoothed


def smooth_angles(
    prev: Optional[Mapping[str, AngleValue]],
    angles: Optional[Mapping[str, AngleValue]],
    alpha: float,
) -> Dict[str, AngleValue]:
    if angles is None:
        return {}
    prev = prev or {}
    smoothed: Dict[str, AngleValue] = {}
    for name, raw in angles.items():
        if not raw.available:
            smoothed[name] = UNAVAILABLE
            continue
        last = prev.get(name)
        if last is None or not last.available:
            smoothed[name] = raw
        else:
            smoothed[name] = AngleValue.of(_ema(alpha, raw.degrees, last.degrees))
    return smoothed


@dataclass(frozen=True)
class SmoothingState:
    landmarks: Dict[int, Landmark2D] = field(default_factory=dict)
    angles: Dict[str, AngleValue] = field(default_factory=dict)

    @property
    def empty(self) -> bool:
        return not self.landmarks and not self.angles
