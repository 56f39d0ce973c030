from typing import Dict, List, Mapping, Optional, Tuple

import cv2
import numpy as np

from joint_metrics.angles import display_name
from joint_metrics.types import FrameMetrics, Severity
from pose_types import RELEVANT_LANDMARKS, SKELETON_CONNECTIONS, Landmark2D, LandmarkFrame

# BGR
SEVERITY_COLORS: Dict[Severity, Tuple[int, int, int]] = {
    Severity.GOOD: (80, 220, 80),
    Severity.WARN: (0, 200, 255),
    Severity.BAD: (60, 60, 255),
    Severity.UNAVAILABLE: (170, 170, 170),
}
SKELETON_COLOR = (102, 238, 255)
JOINT_COLOR = (178, 245, 61)


def _to_pixel(lm: Landmark2D, image_size: Tuple[int, int], mirror: bool) -> Tuple[int, int]:
    width, height = image_size
    x = 1.0 - lm.x if mirror else lm.x
    return int(x * width), int(lm.y * height)


def draw_pose(
    frame,
    landmarks: LandmarkFrame,
    feedback: Optional[Mapping[int, Severity]] = None,
    mirror: bool = False,
) -> None:
    if not landmarks:
        return
    feedback = feedback or {}
    height, width = frame.shape[:2]
    size = (width, height)

    for a, b in SKELETON_CONNECTIONS:
        lm_a = landmarks.get(a)
        lm_b = landmarks.get(b)
        if lm_a is None or lm_b is None:
            continue
        cv2.line(frame, _to_pixel(lm_a, size, mirror), _to_pixel(lm_b, size, mirror), SKELETON_COLOR, 2)

    for index in RELEVANT_LANDMARKS:
        lm = landmarks.get(index)
        if lm is None:
            continue
        center = _to_pixel(lm, size, mirror)
        severity = feedback.get(index)
        if severity is None:
            cv2.circle(frame, center, 4, JOINT_COLOR, -1)
        else:
            cv2.circle(frame, center, 9, SEVERITY_COLORS[severity], -1)
            cv2.circle(frame, center, 9, (255, 255, 255), 1)


def metric_lines(result: FrameMetrics) -> List[Tuple[str, Severity]]:
    if not result.detected:
        return [("No person detected.", Severity.UNAVAILABLE)]
    lines: List[Tuple[str, Severity]] = []
    for name, metric in result.metrics.items():
        ideal = f" ({metric.target.describe()})" if metric.target is not None else ""
        if metric.value.available:
            text = f"{display_name(name)}: {int(round(metric.value.degrees))} deg{ideal}"
        else:
            text = f"{display_name(name)}: N/A{ideal}"
        lines.append((text, metric.severity))
    return lines


def draw_metrics_panel(frame, result: FrameMetrics, origin=(10, 30), extra_lines: Optional[List[str]] = None) -> None:
    lines = metric_lines(result)
    for text in extra_lines or []:
        lines.append((text, None))

    x, y = origin
    panel_height = 28 * len(lines) + 12
    overlay = frame.copy()
    cv2.rectangle(overlay, (x - 8, y - 24), (x + 420, y - 24 + panel_height), (20, 20, 20), -1)
    cv2.addWeighted(overlay, 0.55, frame, 0.45, 0, dst=frame)

    for text, severity in lines:
        color = (255, 255, 255) if severity is None else SEVERITY_COLORS[severity]
        cv2.putText(frame, text, (x, y), cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)
        y += 28


def blank_frame(width: int = 640, height: int = 480) -> np.ndarray:
    return np.zeros((height, width, 3), dtype=np.uint8)
