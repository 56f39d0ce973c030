import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import cv2
import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class CameraFrame:
    frame: Optional[np.ndarray]
    timestamp: float
    ok: bool


def list_cameras(max_index: int = 5, api_preference: int = cv2.CAP_ANY) -> List[int]:
    # OpenCV has no portable device enumeration; probe indices instead.
    found: List[int] = []
    for index in range(max_index):
        capture = cv2.VideoCapture(index, api_preference)
        try:
            if capture.isOpened():
                found.append(index)
        finally:
            capture.release()
    logger.debug("Cameras found: %s", found)
    return found


class CameraStream:
    def __init__(
        self,
        camera_index: int = 0,
        width: int = 1280,
        height: int = 720,
        target_fps: int = 30,
        api_preference: int = cv2.CAP_ANY,
    ):
        self.camera_index = camera_index
        self.width = width
        self.height = height
        self.target_fps = target_fps
        self.api_preference = api_preference
        self._capture: Optional[cv2.VideoCapture] = None
        self._last_time = time.time()

    def open(self) -> bool:
        self.release()
        capture = cv2.VideoCapture(self.camera_index, self.api_preference)
        if not capture.isOpened():
            capture.release()
            logger.error("Could not open camera %d", self.camera_index)
            return False
        capture.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        capture.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        capture.set(cv2.CAP_PROP_FPS, self.target_fps)
        self._capture = capture
        logger.info("Camera %d opened at %dx%d", self.camera_index, self.width, self.height)
        return True

    def switch(self, camera_index: int) -> bool:
        self.camera_index = camera_index
        return self.open()

    def read(self) -> CameraFrame:
        if self._capture is None:
            return CameraFrame(None, time.time(), False)

        ok, frame = self._capture.read()
        now = time.time()
        if not ok:
            return CameraFrame(None, now, False)

        # Pace reads so the pipeline sees a steady frame rate.
        if self.target_fps > 0:
            min_frame_time = 1.0 / float(self.target_fps)
            elapsed = now - self._last_time
            if elapsed < min_frame_time:
                time.sleep(min_frame_time - elapsed)
                now = time.time()
        self._last_time = now
        return CameraFrame(frame, now, True)

    def release(self) -> None:
        if self._capture is not None:
            self._capture.release()
            self._capture = None
