# retro_chip8/core/cpu.py
"""
Core Layer (抽象CPU)

命令サイクル（フェッチ→デコード→PC更新→実行）の順序と、
1命令ごとのSnapshot生成を定義します。命令の意味はアーキテクチャ側で実装します。
"""
from abc import ABC, abstractmethod
from typing import Dict

from retro_chip8.transport.bus import Bus
from retro_chip8.core.snapshot import Snapshot, Operation, Metadata
from retro_chip8.core.state import CpuState

# @intent:responsibility 命令サイクルの骨格を提供し、各段階をサブクラスへ委ねます。
class AbstractCpu(ABC):
    # @intent:pre-condition `bus`にはメモリ空間全体をカバーするデバイスが登録済みである必要があります。
    def __init__(self, bus: Bus):
        self._bus = bus
        self._state: CpuState = self._create_initial_state()
        self._instruction_count = 0

    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        pass

    # @intent:responsibility 電源投入直後の状態に戻します。メモリの内容は変更しません。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._instruction_count = 0

    def get_state(self) -> CpuState:
        return self._state

    @property
    def instruction_count(self) -> int:
        return self._instruction_count

    @abstractmethod
    def _fetch(self) -> int:
        """
        PCの位置の命令ワードを返します。PCは変更しません。
        """

    @abstractmethod
    def _decode(self, word: int) -> Operation:
        pass

    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility 1命令を実行し、その結果のSnapshotを返します。
    # @intent:post-condition 実行時の例外はそのまま呼び出し元へ伝播し、命令数は加算されません。
    def step(self) -> Snapshot:
        self._bus.get_and_clear_activity_log()
        pc = self._state.pc

        operation = self._decode(self._fetch())
        # 分岐命令はPCを上書きするため、実行前に次の命令へ進めておく
        self._update_pc(operation)
        self._execute(operation)

        self._instruction_count += 1
        return Snapshot(
            state=self._state,  # コピーではなく参照
            operation=operation,
            metadata=Metadata(
                instruction_count=self._instruction_count,
                pc=pc,
                trace=f"{pc:04X}: {operation.opcode_hex} {operation.text()}",
            ),
            bus_activity=self._bus.get_and_clear_activity_log(),
        )

    def _update_pc(self, operation: Operation) -> None:
        self._state.pc = (self._state.pc + operation.length) & 0xFFFF

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        レジスタ名と値の辞書を返します（ログ出力用）。
        """
