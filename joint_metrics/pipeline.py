import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from joint_metrics.angles import compute_angles
from joint_metrics.classification import AngleTarget, classify
from joint_metrics.config import (
    ALPHA_ANGLE,
    ALPHA_LANDMARK,
    DEFAULT_LATERALITY,
    DEFAULT_TARGETS,
    PipelineConfig,
    valid_alpha,
)
from joint_metrics.side_selection import landmark_severities, select_active
from joint_metrics.smoothing import SmoothingState, smooth_angles, smooth_landmarks
from joint_metrics.types import UNAVAILABLE, AngleMetric, FrameMetrics, Laterality, Severity
from joint_metrics.validation import validate_frame

logger = logging.getLogger(__name__)


def _coerce_laterality(laterality: Union[Laterality, str, None]) -> Laterality:
    if laterality is None:
        return DEFAULT_LATERALITY
    try:
        return Laterality(laterality)
    except ValueError:
        logger.warning("Unknown laterality %r, using %s", laterality, DEFAULT_LATERALITY.value)
        return DEFAULT_LATERALITY


def _coerce_alpha(name: str, alpha: float, default: float) -> float:
    if valid_alpha(alpha):
        return alpha
    if isinstance(alpha, (int, float)) and alpha > 1.0:
        logger.warning("%s=%r is above 1, clamping to 1", name, alpha)
        return 1.0
    logger.warning("%s=%r is outside (0, 1], using %s", name, alpha, default)
    return default


def process_frame(
    raw_frame: Any,
    state: Optional[SmoothingState] = None,
    laterality: Union[Laterality, str, None] = DEFAULT_LATERALITY,
    targets: Optional[Mapping[str, AngleTarget]] = None,
    alpha_landmark: float = ALPHA_LANDMARK,
    alpha_angle: float = ALPHA_ANGLE,
    min_visibility: Optional[float] = None,
) -> Tuple[FrameMetrics, SmoothingState]:
    """
    Turn one detection result into classified metrics for the active side.

    The returned SmoothingState must be handed back on the next call; it is
    the only state carried between frames. A frame with no detection returns
    every active metric as unavailable together with an empty state, so the
    next detection seeds smoothing from its own raw values.
    """
    state = state or SmoothingState()
    targets = DEFAULT_TARGETS if targets is None else targets
    active = select_active(_coerce_laterality(laterality))
    alpha_landmark = _coerce_alpha("alpha_landmark", alpha_landmark, ALPHA_LANDMARK)
    alpha_angle = _coerce_alpha("alpha_angle", alpha_angle, ALPHA_ANGLE)

    frame = validate_frame(raw_frame, min_visibility)
    if frame is None:
        if not state.empty:
            logger.debug("Tracking lost, smoothing state reset")
        metrics = {name: AngleMetric(UNAVAILABLE, Severity.UNAVAILABLE, targets.get(name)) for name in sorted(active)}
        return FrameMetrics(metrics=metrics), SmoothingState()

    if state.empty:
        logger.debug("Subject acquired, seeding smoothing with %d landmarks", len(frame))

    landmarks = smooth_landmarks(state.landmarks, frame, alpha_landmark)
    angles = smooth_angles(state.angles, compute_angles(landmarks), alpha_angle)

    metrics: Dict[str, AngleMetric] = {}
    for name in sorted(active):
        value = angles.get(name, UNAVAILABLE).rounded()
        target = targets.get(name)
        metrics[name] = AngleMetric(value, classify(value, target), target)

    result = FrameMetrics(
        metrics=metrics,
        landmarks=landmarks,
        detected=True,
        feedback_landmarks=landmark_severities({name: m.severity for name, m in metrics.items()}),
    )
    return result, SmoothingState(landmarks=landmarks, angles=angles)


class MetricsPipeline:
    """Holds the smoothing state between frames for a single driving loop."""

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig()
        self._state = SmoothingState()

    @property
    def state(self) -> SmoothingState:
        return self._state

    def update(self, raw_frame: Any, laterality: Union[Laterality, str, None] = None) -> FrameMetrics:
        config = self.config
        result, self._state = process_frame(
            raw_frame,
            self._state,
            laterality=config.laterality if laterality is None else laterality,
            targets=config.targets,
            alpha_landmark=config.alpha_landmark,
            alpha_angle=config.alpha_angle,
            min_visibility=config.min_visibility,
        )
        return result

    def reset(self) -> None:
        self._state = SmoothingState()
