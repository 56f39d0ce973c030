"""
Joint-angle metrics computed from per-frame pose landmarks.

Validation, two-stage smoothing, angle derivation and target classification,
tied together by ``process_frame`` / ``MetricsPipeline``.
"""

from joint_metrics.angles import ANGLE_NAMES, compute_angles
from joint_metrics.classification import PointTarget, RangeTarget, classify
from joint_metrics.config import PipelineConfig
from joint_metrics.pipeline import MetricsPipeline, process_frame
from joint_metrics.side_selection import feedback_landmarks, select_active
from joint_metrics.smoothing import SmoothingState, smooth_angles, smooth_landmarks
from joint_metrics.types import UNAVAILABLE, AngleMetric, AngleValue, FrameMetrics, Laterality, Severity
from joint_metrics.validation import validate_frame, validate_landmark

__all__ = [
    "ANGLE_NAMES",
    "UNAVAILABLE",
    "AngleMetric",
    "AngleValue",
    "FrameMetrics",
    "Laterality",
    "MetricsPipeline",
    "PipelineConfig",
    "PointTarget",
    "RangeTarget",
    "Severity",
    "SmoothingState",
    "classify",
    "compute_angles",
    "feedback_landmarks",
    "process_frame",
    "select_active",
    "smooth_angles",
    "smooth_landmarks",
    "validate_frame",
    "validate_landmark",
]
