import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, Optional

from pose_types import LandmarkFrame


@dataclass(frozen=True)
class AngleValue:
    """
    A measured angle in degrees, or the marker for "could not be measured".

    Unavailable values are never blended into smoothing history nor classified
    as numbers; check ``available`` before reading ``degrees``.
    """

    degrees: Optional[float] = None

    @property
    def available(self) -> bool:
        return self.degrees is not None

    @classmethod
    def unavailable(cls) -> "AngleValue":
        return UNAVAILABLE

    @classmethod
    def of(cls, degrees: Optional[float]) -> "AngleValue":
        """Wrap a measurement, clamped to [0, 180]. Non-finite input is unavailable."""
        if degrees is None or not math.isfinite(degrees):
            return UNAVAILABLE
        return cls(min(max(float(degrees), 0.0), 180.0))

    def rounded(self) -> "AngleValue":
        if self.degrees is None:
            return self
        return AngleValue(round(self.degrees, 2))

    def __str__(self) -> str:
        if self.degrees is None:
            return "N/A"
        return f"{self.degrees:.2f}"


UNAVAILABLE = AngleValue()


class Severity(IntEnum):
    GOOD = 0
    WARN = 1
    BAD = 2
    UNAVAILABLE = 3


class Laterality(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


@dataclass(frozen=True)
class AngleMetric:
    value: AngleValue
    severity: Severity
    target: Optional[object] = None


@dataclass
class FrameMetrics:
    metrics: Dict[str, AngleMetric]
    landmarks: LandmarkFrame = field(default_factory=dict)
    detected: bool = False
    feedback_landmarks: Dict[int, Severity] = field(default_factory=dict)
