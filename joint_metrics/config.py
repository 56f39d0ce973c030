"""
In-process configuration for the joint metrics pipeline.

Nothing here is read from disk. Drivers build a PipelineConfig (or keep the
defaults) and may swap it between frames; a new config takes effect on the
next processed frame without touching already-smoothed state.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from joint_metrics.classification import AngleTarget, PointTarget, RangeTarget
from joint_metrics.types import Laterality

# Lower alpha means heavier smoothing and more lag.
ALPHA_LANDMARK = 0.4
ALPHA_ANGLE = 0.9

DEFAULT_LATERALITY = Laterality.LEFT


def valid_alpha(alpha: float) -> bool:
    return isinstance(alpha, (int, float)) and not isinstance(alpha, bool) and 0.0 < alpha <= 1.0


DEFAULT_TARGETS: Dict[str, AngleTarget] = {
    "Trunk_Angle": RangeTarget(minimum=0.0, maximum=15.0),
    "Left_Hip_Angle": PointTarget(ideal=90.0),
    "Left_Knee_Angle": PointTarget(ideal=90.0),
    "Left_Ankle_Angle": PointTarget(ideal=90.0),
    "Right_Hip_Angle": PointTarget(ideal=90.0),
    "Right_Knee_Angle": PointTarget(ideal=90.0),
    "Right_Ankle_Angle": PointTarget(ideal=90.0),
}


@dataclass(frozen=True)
class PipelineConfig:
    alpha_landmark: float = ALPHA_LANDMARK
    alpha_angle: float = ALPHA_ANGLE
    laterality: Laterality = DEFAULT_LATERALITY
    targets: Dict[str, AngleTarget] = field(default_factory=lambda: dict(DEFAULT_TARGETS))
    min_visibility: Optional[float] = None

    def __post_init__(self):
        for name in ("alpha_landmark", "alpha_angle"):
            if not valid_alpha(getattr(self, name)):
                raise ValueError(f"{name} must be in (0, 1], got {getattr(self, name)!r}")

    def with_target(self, angle_name: str, target: AngleTarget) -> "PipelineConfig":
        targets = dict(self.targets)
        targets[angle_name] = target
        return replace(self, targets=targets)

    def with_alphas(self, alpha_landmark: Optional[float] = None, alpha_angle: Optional[float] = None) -> "PipelineConfig":
        return replace(
            self,
            alpha_landmark=self.alpha_landmark if alpha_landmark is None else alpha_landmark,
            alpha_angle=self.alpha_angle if alpha_angle is None else alpha_angle,
        )

