import html
import logging
import sys
from typing import Optional

import cv2
from PySide6 import QtCore, QtGui, QtWidgets

from camera import CameraStream, list_cameras
from joint_metrics import FrameMetrics, Laterality, MetricsPipeline, Severity
from logger import setup_logger
from pose_detection import PoseDetector
from visualization import draw_pose, metric_lines

logger = logging.getLogger(__name__)

SEVERITY_CSS = {
    Severity.GOOD: "#4cd964",
    Severity.WARN: "#ffc83d",
    Severity.BAD: "#ff5a5a",
    Severity.UNAVAILABLE: "#9aa1a6",
}


def metrics_html(result: FrameMetrics) -> str:
    spans = [
        f'<span style="color:{SEVERITY_CSS[severity]}">{html.escape(text)}</span>'
        for text, severity in metric_lines(result)
    ]
    return "<br>".join(spans)


class WorkoutPage(QtWidgets.QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self._setup_runtime()

    def _setup_ui(self):
        self.setObjectName("WorkoutPage")
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        self.video_label = QtWidgets.QLabel("Camera feed")
        self.video_label.setAlignment(QtCore.Qt.AlignCenter)
        self.video_label.setMinimumSize(720, 480)
        self.video_label.setStyleSheet("background:#101214; border-radius:12px;")

        right_panel = QtWidgets.QVBoxLayout()
        right_panel.setSpacing(12)

        self.camera_combo = QtWidgets.QComboBox()
        self.side_combo = QtWidgets.QComboBox()
        for laterality in Laterality:
            self.side_combo.addItem(laterality.value.capitalize(), laterality.value)

        self.start_button = QtWidgets.QPushButton("Loading model...")
        self.start_button.setEnabled(False)
        self.start_button.setStyleSheet(
            "QPushButton{background:#1f6f5f;color:white;padding:10px 20px;border-radius:10px;font-size:14px;}"
            "QPushButton:hover{background:#249b84;}"
            "QPushButton:disabled{background:#2b2f33;color:#9aa1a6;}"
        )

        self.metrics_box = QtWidgets.QLabel("")
        self.metrics_box.setTextFormat(QtCore.Qt.RichText)
        self.metrics_box.setAlignment(QtCore.Qt.AlignTop | QtCore.Qt.AlignLeft)
        self.metrics_box.setMinimumWidth(300)
        self.metrics_box.setStyleSheet(
            "QLabel{background:#15181b;border:1px solid #2b2f33;border-radius:10px;"
            "color:#e6e6e6;padding:12px;font-size:14px;}"
        )
        self.status_label = QtWidgets.QLabel("")
        self.status_label.setStyleSheet("color:#ff9b9b;")

        right_panel.addWidget(QtWidgets.QLabel("Camera"))
        right_panel.addWidget(self.camera_combo)
        right_panel.addWidget(QtWidgets.QLabel("Side"))
        right_panel.addWidget(self.side_combo)
        right_panel.addWidget(self.start_button)
        right_panel.addWidget(self.metrics_box, 1)
        right_panel.addWidget(self.status_label)

        layout.addWidget(self.video_label, 1)
        layout.addLayout(right_panel)

    def _setup_runtime(self):
        self.camera: Optional[CameraStream] = None
        self.detector: Optional[PoseDetector] = None
        self.pipeline = MetricsPipeline()

        for index in list_cameras():
            self.camera_combo.addItem(f"Camera {index}", index)
        self.side_combo.setCurrentIndex(self.side_combo.findData(self.pipeline.config.laterality.value))
        self.start_button.clicked.connect(self.start_camera)
        self.camera_combo.currentIndexChanged.connect(self._on_camera_changed)

        try:
            self.detector = PoseDetector()
        except Exception:
            logger.exception("Failed to load pose model")
            self.status_label.setText("Failed to load pose model.")
        else:
            self.start_button.setEnabled(True)
            self.start_button.setText("Start Workout")
            self.metrics_box.setText("Model loaded. Click Start to begin.")

        self.timer = QtCore.QTimer(self)
        self.timer.timeout.connect(self._update_frame)

    def start_camera(self):
        index = self.camera_combo.currentData()
        self.camera = CameraStream(camera_index=0 if index is None else index, width=1280, height=720, target_fps=30)
        if not self.camera.open():
            self.status_label.setText("Camera error. Check permissions in the OS settings.")
            self.camera = None
            return
        self.status_label.setText("")
        self.pipeline.reset()
        self.timer.start(33)

    def stop_camera(self):
        self.timer.stop()
        if self.camera is not None:
            self.camera.release()
            self.camera = None

    def shutdown(self):
        self.stop_camera()
        if self.detector is not None:
            self.detector.close()
            self.detector = None

    def _on_camera_changed(self, _idx: int):
        if self.camera is not None:
            self.stop_camera()
            self.start_camera()

    def _update_frame(self):
        if self.camera is None or self.detector is None:
            return

        cam_frame = self.camera.read()
        if not cam_frame.ok:
            self.status_label.setText("Camera error")
            return

        frame = cam_frame.frame
        laterality = self.side_combo.currentData()
        result = self.pipeline.update(self.detector.process(frame), laterality)

        display = cv2.flip(frame, 1)
        draw_pose(display, result.landmarks, feedback=result.feedback_landmarks, mirror=True)
        self.metrics_box.setText(metrics_html(result))

        frame_rgb = cv2.cvtColor(display, cv2.COLOR_BGR2RGB)
        h, w, ch = frame_rgb.shape
        bytes_per_line = ch * w
        image = QtGui.QImage(frame_rgb.data, w, h, bytes_per_line, QtGui.QImage.Format_RGB888)
        pixmap = QtGui.QPixmap.fromImage(image)
        self.video_label.setPixmap(pixmap.scaled(self.video_label.size(), QtCore.Qt.KeepAspectRatio))


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Joint Angle Feedback")
        self.resize(1280, 720)
        self.setStyleSheet("QMainWindow{background:#0f1113;} QLabel{color:#e6e6e6;}")
        self.workout_page = WorkoutPage()
        self.setCentralWidget(self.workout_page)

    def closeEvent(self, event):
        self.workout_page.shutdown()
        super().closeEvent(event)


def main():
    setup_logger()
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
