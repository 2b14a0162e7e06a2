"""
音声出力モジュール。

サウンドタイマーが動作している間だけ、一定周波数の正弦波を再生します。
音色は仮想マシンの関心外であり、ここでは固定です。
"""
import math
import struct
from typing import Optional

from PySide6.QtCore import QIODevice, QObject
from PySide6.QtMultimedia import QAudio, QAudioFormat, QAudioSink, QMediaDevices

from retro_chip8.common.errors import CollaboratorError

SAMPLE_RATE = 44100
TONE_FREQUENCY = 329
AMPLITUDE = 0x2000

# @intent:utility_function 1秒分の正弦波(16bit符号付き、モノラル)を生成します。
# @intent:rationale 周波数が整数であれば1秒で位相が一周するため、バッファを繰り返しても途切れません。
def generate_tone(frequency: int = TONE_FREQUENCY, sample_rate: int = SAMPLE_RATE) -> bytes:
    samples = [
        int(AMPLITUDE * math.sin(2 * math.pi * frequency * i / sample_rate))
        for i in range(sample_rate)
    ]
    return struct.pack(f"<{len(samples)}h", *samples)

# @intent:responsibility QAudioSinkへ無限にトーンのサンプルを供給する読み込み専用デバイス。
class ToneGenerator(QIODevice):
    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._buffer = generate_tone()
        self._pos = 0

    def readData(self, maxlen: int) -> bytes:
        data = bytearray()
        total = 0
        while total < maxlen:
            chunk = min(len(self._buffer) - self._pos, maxlen - total)
            data += self._buffer[self._pos:self._pos + chunk]
            self._pos = (self._pos + chunk) % len(self._buffer)
            total += chunk
        return bytes(data)

    def writeData(self, data) -> int:
        return 0

    def bytesAvailable(self) -> int:
        return len(self._buffer) + super().bytesAvailable()

# @intent:responsibility ToneSinkの実装。音声出力を一時停止/再開することで音のオン/オフを切り替えます。
class ToneOutput(QObject):
    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        device = QMediaDevices.defaultAudioOutput()
        if device.isNull():
            raise CollaboratorError("audio", "unable to get output device")

        audio_format = QAudioFormat()
        audio_format.setSampleRate(SAMPLE_RATE)
        audio_format.setChannelCount(1)
        audio_format.setSampleFormat(QAudioFormat.SampleFormat.Int16)
        if not device.isFormatSupported(audio_format):
            raise CollaboratorError("audio", f"output device '{device.description()}' rejects 16-bit mono PCM")

        self._generator = ToneGenerator(self)
        self._generator.open(QIODevice.OpenModeFlag.ReadOnly)
        self._sink = QAudioSink(device, audio_format, self)
        self._sink.start(self._generator)
        self._sink.suspend()
        self._check("start")

    def set_tone(self, on: bool) -> None:
        if on:
            self._sink.resume()
        else:
            self._sink.suspend()
        self._check("resume" if on else "suspend")

    def stop(self) -> None:
        self._sink.stop()
        self._generator.close()

    def _check(self, action: str) -> None:
        error = self._sink.error()
        if error != QAudio.Error.NoError:
            raise CollaboratorError("audio", f"{action} failed: {error.name}")
