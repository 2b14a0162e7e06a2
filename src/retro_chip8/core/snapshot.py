# retro_chip8/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、1命令実行後のCPUとバスの状態を記録した不変のデータ構造を定義します。
フレームランナーへの情報提供と、トレースログの出力に用いる責務を負います。
"""
from dataclasses import dataclass, field
from typing import List, Optional

from retro_chip8.core.state import CpuState
from retro_chip8.transport.bus import BusAccess


# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True) # 不変データ構造
class Operation:
    """
    デコードされた命令の詳細（ワード、ニーモニック、オペランド、ビットフィールド）を記録するデータクラス。
    """
    word: int # 例: 0x6005
    mnemonic: str # 例: "LD"
    operands: List[str] = field(default_factory=list) # 例: ["V0", "#$05"]
    op: int = 0
    x: int = 0
    y: int = 0
    n: int = 0
    value: int = 0
    address: int = 0
    length: int = 2 # 命令のバイト長
    ends_frame: bool = False # 画面を更新し、現在のバッチを打ち切る命令か

    @property
    def opcode_hex(self) -> str:
        return f"{self.word:04X}"

    # @intent:responsibility トレース表示用の文字列を生成します。
    def text(self) -> str:
        if self.operands:
            return f"{self.mnemonic} " + ", ".join(self.operands)
        return self.mnemonic

# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True) # 不変データ構造
class Metadata:
    """
    実行に関するメタデータ（累計命令数、命令アドレス、トレース文字列）を記録するデータクラス。
    """
    instruction_count: int
    pc: int = 0
    trace: Optional[str] = None # 例: "0200: 6005 LD V0, #$05"

# @intent:responsibility ある一時点におけるCPUとバスの状態を不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Snapshot:
    state: CpuState
    operation: Operation
    metadata: Metadata
    bus_activity: List[BusAccess] = field(default_factory=list)
