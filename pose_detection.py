import logging
from typing import List, Optional

import cv2
import mediapipe as mp

from pose_types import Landmark2D

logger = logging.getLogger(__name__)


class PoseDetector:
    """
    MediaPipe Pose wrapper for a single subject.

    ``process`` returns the 33 landmarks in canonical order, or None when no
    body is detected. Coordinates stay normalized and unfiltered; validation
    and smoothing belong to the metrics pipeline.
    """

    def __init__(
        self,
        model_complexity: int = 0,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ):
        self._pose = mp.solutions.pose.Pose(
            static_image_mode=False,
            model_complexity=model_complexity,
            smooth_landmarks=False,
            enable_segmentation=False,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        logger.info("MediaPipe Pose ready (model_complexity=%d)", model_complexity)

    def process(self, frame_bgr) -> Optional[List[Landmark2D]]:
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self._pose.process(frame_rgb)
        if results.pose_landmarks is None:
            return None
        return [
            Landmark2D(lm.x, lm.y, lm.z, lm.visibility)
            for lm in results.pose_landmarks.landmark
        ]

    def close(self) -> None:
        self._pose.close()
