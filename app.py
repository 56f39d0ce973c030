import logging

import cv2

from camera import CameraStream, list_cameras
from joint_metrics import Laterality, MetricsPipeline
from logger import setup_logger
from pose_detection import PoseDetector
from visualization import blank_frame, draw_metrics_panel, draw_pose

logger = logging.getLogger(__name__)

LATERALITY_KEYS = {
    ord("l"): Laterality.LEFT,
    ord("r"): Laterality.RIGHT,
    ord("b"): Laterality.BOTH,
}


def main():
    setup_logger()
    window_name = "Joint Angle Feedback"

    cameras = list_cameras() or [0]
    camera_pos = 0
    camera = CameraStream(camera_index=cameras[camera_pos], width=1280, height=720, target_fps=30)
    if not camera.open():
        return

    try:
        detector = PoseDetector()
    except Exception:
        logger.exception("Failed to load pose model")
        camera.release()
        return

    pipeline = MetricsPipeline()
    laterality = pipeline.config.laterality

    cv2.namedWindow(window_name, cv2.WINDOW_NORMAL)
    while True:
        if cv2.getWindowProperty(window_name, cv2.WND_PROP_VISIBLE) < 1:
            break
        cam_frame = camera.read()
        if not cam_frame.ok:
            blank = blank_frame()
            cv2.putText(blank, "Camera error", (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
            cv2.imshow(window_name, blank)
            if cv2.waitKey(1) & 0xFF == ord("q"):
                break
            continue

        frame = cam_frame.frame
        result = pipeline.update(detector.process(frame), laterality)

        # Detection runs on the raw frame; only the display is mirrored.
        display = cv2.flip(frame, 1)
        draw_pose(display, result.landmarks, feedback=result.feedback_landmarks, mirror=True)
        draw_metrics_panel(
            display,
            result,
            extra_lines=[
                f"Side: {laterality.value}  Camera: {camera.camera_index}",
                "Keys: L/R/B side, C camera, Q quit",
            ],
        )
        cv2.imshow(window_name, display)

        key = cv2.waitKey(1) & 0xFF
        if key == ord("q"):
            break
        if key in LATERALITY_KEYS:
            laterality = LATERALITY_KEYS[key]
            logger.info("Laterality set to %s", laterality.value)
        elif key == ord("c") and len(cameras) > 1:
            camera_pos = (camera_pos + 1) % len(cameras)
            if camera.switch(cameras[camera_pos]):
                pipeline.reset()

    detector.close()
    camera.release()
    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
