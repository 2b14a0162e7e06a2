# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
表示面・キーボード入力・フレームタイマーを保持し、フレームランナーを駆動します。
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtCore import Qt, QTimer, Slot

from retro_chip8.common.errors import Chip8Error
from retro_chip8.runtime.machine import Machine
from .display_view import DisplayView
from .keypad import KeypadState

logger = logging.getLogger(__name__)

# @intent:responsibility エミュレータのウィンドウを定義し、周期タイマーでフレームを進めます。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    ウィンドウを閉じるかEscapeキーで終了し、致命的エラーの場合は終了コード1を記録します。
    """
    def __init__(self, machine: Machine, display: DisplayView, keypad: KeypadState,
                 frame_rate: int = 60, tone=None, parent: Optional[QWidget] = None):
        super(MainWindow, self).__init__(parent)
        self.setWindowTitle("CHIP-8")
        self._machine = machine
        self._display = display
        self._keypad = keypad
        self._tone = tone
        self._error: Optional[Chip8Error] = None

        self.setCentralWidget(self._display)

        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.setInterval(max(1, round(1000 / frame_rate)))
        self._timer.timeout.connect(self._on_frame)

    @property
    def error(self) -> Optional[Chip8Error]:
        return self._error

    @property
    def exit_code(self) -> int:
        return 1 if self._error is not None else 0

    def start(self) -> None:
        logger.info("Starting machine at %d frames per second", round(1000 / self._timer.interval()))
        self._timer.start()

    # @intent:responsibility 1フレーム分を実行します。致命的エラーの場合はタイマーを止めてウィンドウを閉じます。
    @Slot()
    def _on_frame(self):
        keys_down, keys_released = self._keypad.snapshot()
        try:
            self._machine.run_frame(keys_down, keys_released)
        except Chip8Error as e:
            self._timer.stop()
            self._error = e
            logger.error("%s", e)
            self.close()

    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == Qt.Key.Key_Escape:
            self.close()
            return
        if event.isAutoRepeat() or not self._keypad.press(event.key()):
            super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent):
        if event.isAutoRepeat() or not self._keypad.release(event.key()):
            super().keyReleaseEvent(event)

    # @intent:responsibility ウィンドウが閉じられる際に、タイマーと音声出力を停止します。
    def closeEvent(self, event: QCloseEvent):
        self._timer.stop()
        if self._tone is not None:
            self._tone.stop()
            self._tone = None
        event.accept()
