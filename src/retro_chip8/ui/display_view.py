"""
表示面モジュール。

64x32の単色フレームバッファをQImageに変換し、固定倍率で描画します。
"""
from typing import Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QImage, QPainter, QColor, QPaintEvent

from retro_chip8.common.types import FrameRows
from retro_chip8.arch.chip8.state import SCREEN_WIDTH, SCREEN_HEIGHT, LEFTMOST_PIXEL

PIXEL_SCALE = 16
COLOR_ON = QColor("#FFFFFF")
COLOR_OFF = QColor("#000000")

# @intent:utility_function フレームバッファの行列を64x32のQImageへ変換します。
def rows_to_image(rows: FrameRows) -> QImage:
    image = QImage(SCREEN_WIDTH, SCREEN_HEIGHT, QImage.Format.Format_RGB32)
    image.fill(COLOR_OFF)
    on = COLOR_ON.rgb()
    for y, row in enumerate(rows[:SCREEN_HEIGHT]):
        if not row:
            continue
        for x in range(SCREEN_WIDTH):
            if row & (LEFTMOST_PIXEL >> x):
                image.setPixel(x, y, on)
    return image

# @intent:responsibility 仮想マシンから送られたフレームを保持し、ウィジェット全体に拡大表示します。
class DisplayView(QWidget):
    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setFixedSize(SCREEN_WIDTH * PIXEL_SCALE, SCREEN_HEIGHT * PIXEL_SCALE)
        self._image = rows_to_image([0] * SCREEN_HEIGHT)

    def image(self) -> QImage:
        return self._image

    # @intent:responsibility DisplaySinkの実装。フレームを差し替えて再描画を要求します。
    def present(self, rows: FrameRows) -> None:
        self._image = rows_to_image(rows)
        self.update()

    def paintEvent(self, event: QPaintEvent):
        painter = QPainter(self)
        painter.drawImage(self.rect(), self._image)
        painter.end()
