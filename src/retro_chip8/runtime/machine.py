# retro_chip8/runtime/machine.py
"""
フレームランナーモジュール。

外部の周期信号(既定60Hz)1回ごとに、タイマーの減算と一定数の命令の実行を行い、
フレームバッファの更新と音の再生/停止を外部の協調オブジェクトへ通知する責務を負います。
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.common.errors import Chip8Error, CollaboratorError, MalformedProgramError
from retro_chip8.common.types import FrameRows
from retro_chip8.core.snapshot import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_CYCLES_PER_FRAME = 100

# @intent:responsibility フレームバッファを受け取って表示する外部協調オブジェクトのインターフェース。
class DisplaySink(Protocol):
    def present(self, rows: FrameRows) -> None:
        ...

# @intent:responsibility 音の再生/停止信号を受け取る外部協調オブジェクトのインターフェース。
class ToneSink(Protocol):
    def set_tone(self, on: bool) -> None:
        ...

# @intent:responsibility 1フレーム分の実行結果を記録します。
@dataclass(frozen=True)
class FrameResult:
    instructions: int
    display_flushed: bool
    tone_on: bool
    last_snapshot: Optional[Snapshot] = None

# @intent:responsibility CPUを外部の周期信号に合わせて駆動します。
class Machine:
    """
    1回の`run_frame`で、タイマーを1回減算した後に最大`cycles_per_frame`個の命令を実行します。
    画面消去・描画命令を実行した時点でフレームバッファを表示面へ送り、そのフレームを打ち切ります。
    """
    def __init__(self, cpu: Chip8Cpu, display: Optional[DisplaySink] = None,
                 tone: Optional[ToneSink] = None, cycles_per_frame: int = DEFAULT_CYCLES_PER_FRAME):
        if cycles_per_frame <= 0:
            raise ValueError("cycles_per_frame must be a positive integer.")
        self._cpu = cpu
        self._display = display
        self._tone = tone
        self._cycles_per_frame = cycles_per_frame
        self._tone_on = False
        self._frame_count = 0

    @property
    def cpu(self) -> Chip8Cpu:
        return self._cpu

    @property
    def tone_on(self) -> bool:
        return self._tone_on

    @property
    def frame_count(self) -> int:
        return self._frame_count

    # @intent:responsibility 1フレーム分（タイマー減算1回 + 命令バッチ1回）を実行します。
    # @intent:post-condition 不正なプログラムや協調オブジェクトの失敗はChip8Errorとして呼び出し元へ伝播します。
    def run_frame(self, keys_down: Iterable[int] = (), keys_released: Iterable[int] = ()) -> FrameResult:
        self._frame_count += 1
        self._cpu.set_keypad(keys_down, keys_released)

        self._cpu.tick_timers()
        self._sync_tone()

        executed = 0
        flushed = False
        snapshot: Optional[Snapshot] = None
        try:
            for _ in range(self._cycles_per_frame):
                snapshot = self._cpu.step()
                executed += 1
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(snapshot.metadata.trace)
                self._sync_tone()

                if snapshot.operation.ends_frame:
                    self._present()
                    flushed = True
                    break
        except MalformedProgramError:
            logger.error("Program halted after %d instructions; registers: %s",
                         self._cpu.instruction_count, self._format_registers())
            raise

        return FrameResult(instructions=executed, display_flushed=flushed,
                           tone_on=self._tone_on, last_snapshot=snapshot)

    def _format_registers(self) -> str:
        return " ".join(f"{name}={value:02X}" for name, value in self._cpu.get_register_map().items())

    # @intent:responsibility サウンドタイマーの0/非0の遷移を検出し、音の再生/停止を通知します。
    def _sync_tone(self) -> None:
        desired = self._cpu.get_state().sound > 0
        if desired == self._tone_on:
            return
        self._tone_on = desired
        if self._tone is None:
            return
        try:
            self._tone.set_tone(desired)
        except Chip8Error:
            raise
        except Exception as e:
            raise CollaboratorError("audio", str(e), e) from e

    # @intent:responsibility 現在のフレームバッファを表示面へ送ります。
    def _present(self) -> None:
        if self._display is None:
            return
        rows = tuple(self._cpu.get_state().screen)
        try:
            self._display.present(rows)
        except Chip8Error:
            raise
        except Exception as e:
            raise CollaboratorError("display", str(e), e) from e
