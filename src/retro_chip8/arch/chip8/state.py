# src/retro_chip8/arch/chip8/state.py
"""
CHIP-8 仮想マシン固有の状態定義。
"""
from dataclasses import dataclass, field
from typing import List

from retro_chip8.core.state import CpuState
from retro_chip8.common.types import KeySet

# @intent:constant 表示面の寸法とメモリ配置。
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
MEMORY_SIZE = 0x1000
ADDRESS_MASK = 0x0FFF
PROGRAM_START = 0x200
DEFAULT_STACK_DEPTH = 16
FLAG_REGISTER = 0xF

# @intent:constant 1行(64bit)の左端ピクセルに対応するビット。
LEFTMOST_PIXEL = 1 << (SCREEN_WIDTH - 1)

# @intent:responsibility 仮想マシンの全てのレジスタ、スタック、タイマー、フレームバッファ、キーパッドの状態を保持します。
# @intent:rationale 状態を単一のデータクラスにまとめ、各命令の実行関数へ排他的に渡します。
@dataclass
class Chip8State(CpuState):
    """
    CHIP-8 仮想マシンの状態を保持するデータクラス。
    フレームバッファは32行の整数列で、各行のbit63が左端(列0)のピクセルに対応します。
    """
    pc: int = PROGRAM_START
    v: List[int] = field(default_factory=lambda: [0] * 16) # V0-VF
    idx: int = 0x0000 # Index Register (I)
    stack: List[int] = field(default_factory=list)
    stack_depth: int = DEFAULT_STACK_DEPTH
    delay: int = 0x00
    sound: int = 0x00
    screen: List[int] = field(default_factory=lambda: [0] * SCREEN_HEIGHT)
    # 外部から1フレームに1度差し替えられるキーパッドのスナップショット
    keys_down: KeySet = frozenset()
    keys_released: KeySet = frozenset()

    @property
    def vf(self) -> int:
        return self.v[FLAG_REGISTER]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[FLAG_REGISTER] = value & 0xFF

    # @intent:accessor 指定座標のピクセルが点灯しているかを返します。
    def pixel(self, x: int, y: int) -> bool:
        return (self.screen[y] & (LEFTMOST_PIXEL >> x)) != 0

    def clear_screen(self) -> None:
        for row in range(SCREEN_HEIGHT):
            self.screen[row] = 0
