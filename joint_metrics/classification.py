from dataclasses import dataclass
from typing import Optional, Union

from joint_metrics.types import AngleValue, Severity

MIN_RANGE_WIDTH = 1e-6


@dataclass(frozen=True)
class PointTarget:
    ideal: float
    good: float = 5.0
    warn: float = 10.0

    def describe(self) -> str:
        return f"Ideal: {self.ideal:g}"


@dataclass(frozen=True)
class RangeTarget:
    minimum: float
    maximum: float
    warn_fraction: float = 0.2

    def describe(self) -> str:
        return f"Ideal: {self.minimum:g}-{self.maximum:g}"


AngleTarget = Union[PointTarget, RangeTarget]


def classify(value: AngleValue, target: Optional[AngleTarget]) -> Severity:
    if not value.available or target is None:
        return Severity.UNAVAILABLE
    degrees = value.degrees

    if isinstance(target, PointTarget):
        deviation = abs(degrees - target.ideal)
        if deviation <= target.good:
            return Severity.GOOD
        if deviation <= target.warn:
            return Severity.WARN
        return Severity.BAD

    if isinstance(target, RangeTarget):
        if target.minimum <= degrees <= target.maximum:
            return Severity.GOOD
        if degrees < target.minimum:
            deviation = target.minimum - degrees
        else:
            deviation = degrees - target.maximum
        width = max(target.maximum - target.minimum, MIN_RANGE_WIDTH)
        if deviation / width <= target.warn_fraction:
            return Severity.WARN
        return Severity.BAD

    return Severity.UNAVAILABLE
