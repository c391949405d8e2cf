"""Camera dialog that takes one photo or records one video."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import (
    QAudioInput,
    QCamera,
    QImageCapture,
    QMediaCaptureSession,
    QMediaDevices,
    QMediaRecorder,
)
from PySide6.QtMultimediaWidgets import QVideoWidget
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from core.models import MediaKind


class CaptureDialog(QDialog):
    """Live camera preview with a shutter and a cancel button.

    On accept, `captured_path` names the written file. When the camera,
    the image capture or the recorder fails, `error_message` is set and the
    dialog is rejected.
    """

    def __init__(self, kind: MediaKind, output_path: Path, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Capture Video" if kind is MediaKind.VIDEO else "Capture Photo")

        self._kind = kind
        self._output_path = output_path
        self.captured_path: str | None = None
        self.error_message: str | None = None
        self._finishing = False

        self._camera = QCamera(QMediaDevices.defaultVideoInput(), self)
        self._session = QMediaCaptureSession(self)
        self._session.setCamera(self._camera)
        self._camera.errorOccurred.connect(self._on_camera_error)

        self._preview = QVideoWidget(self)
        self._session.setVideoOutput(self._preview)

        self._image_capture: QImageCapture | None = None
        self._recorder: QMediaRecorder | None = None
        if kind is MediaKind.VIDEO:
            self._audio_input = QAudioInput(self)
            self._session.setAudioInput(self._audio_input)
            self._recorder = QMediaRecorder(self)
            self._session.setRecorder(self._recorder)
            self._recorder.setOutputLocation(QUrl.fromLocalFile(str(output_path)))
            self._recorder.recorderStateChanged.connect(self._on_recorder_state_changed)
            self._recorder.errorOccurred.connect(self._on_recorder_error)
        else:
            self._image_capture = QImageCapture(self)
            self._session.setImageCapture(self._image_capture)
            self._image_capture.imageSaved.connect(self._on_image_saved)
            self._image_capture.errorOccurred.connect(self._on_image_error)

        self._setup_ui()
        self._camera.start()

    def _setup_ui(self) -> None:
        root = QVBoxLayout(self)
        self._preview.setMinimumSize(480, 360)
        self._preview.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        root.addWidget(self._preview)

        btns = QHBoxLayout()
        self.btn_shutter = QPushButton("Record" if self._kind is MediaKind.VIDEO else "Take Photo")
        self.btn_cancel = QPushButton("Cancel")
        btns.addWidget(self.btn_shutter)
        btns.addStretch(1)
        btns.addWidget(self.btn_cancel)
        root.addLayout(btns)

        self.btn_shutter.clicked.connect(self._on_shutter)
        self.btn_cancel.clicked.connect(self.reject)

        if self._image_capture is not None:
            self.btn_shutter.setEnabled(self._image_capture.isReadyForCapture())
            self._image_capture.readyForCaptureChanged.connect(self.btn_shutter.setEnabled)

    def _on_shutter(self) -> None:
        if self._image_capture is not None:
            self.btn_shutter.setEnabled(False)
            self._image_capture.captureToFile(str(self._output_path))
            return
        assert self._recorder is not None
        if self._recorder.recorderState() == QMediaRecorder.RecorderState.RecordingState:
            self.btn_shutter.setEnabled(False)
            self._finishing = True
            self._recorder.stop()
        else:
            self._recorder.record()
            self.btn_shutter.setText("Stop")

    def _on_image_saved(self, _id: int, file_name: str) -> None:
        logger.info("Photo captured: {}", file_name)
        self.captured_path = file_name
        self.accept()

    def _on_recorder_state_changed(self, state: QMediaRecorder.RecorderState) -> None:
        if state != QMediaRecorder.RecorderState.StoppedState or self._recorder is None:
            return
        if not self._finishing or self.error_message is not None:
            return
        location = self._recorder.actualLocation().toLocalFile()
        logger.info("Video recorded: {}", location)
        self.captured_path = location or str(self._output_path)
        self.accept()

    def _on_camera_error(self, _error: QCamera.Error, message: str) -> None:
        self._fail(message or "Camera error")

    def _on_image_error(self, _id: int, _error: QImageCapture.Error, message: str) -> None:
        self._fail(message or "Photo capture failed")

    def _on_recorder_error(self, _error: QMediaRecorder.Error, message: str) -> None:
        self._fail(message or "Video recording failed")

    def _fail(self, message: str) -> None:
        logger.error("Capture failed: {}", message)
        if self.error_message is None:
            self.error_message = message
        self.reject()

    def done(self, result: int) -> None:  # type: ignore[override]
        self._finishing = False
        if self._recorder is not None and self.captured_path is None:
            if self._recorder.recorderState() != QMediaRecorder.RecorderState.StoppedState:
                self._recorder.stop()
        self._camera.stop()
        super().done(result)
