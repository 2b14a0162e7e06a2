# src/retro_chip8/arch/chip8/cpu.py
"""
CHIP-8 仮想マシンの中心モジュール。
"""
from typing import Dict, Iterable

from retro_chip8.core.cpu import AbstractCpu
from retro_chip8.core.snapshot import Operation
from retro_chip8.arch.chip8.state import Chip8State, DEFAULT_STACK_DEPTH
from retro_chip8.arch.chip8.instructions import decode_opcode, execute_instruction
from retro_chip8.arch.chip8.instructions.base import read_word
from retro_chip8.transport.bus import Bus

# @intent:responsibility CHIP-8の具体的なエミュレーションロジック（フェッチ、デコード、実行、タイマー）を提供します。
class Chip8Cpu(AbstractCpu):
    """
    CHIP-8 仮想マシンをエミュレートするクラス。
    """
    def __init__(self, bus: Bus, stack_depth: int = DEFAULT_STACK_DEPTH):
        self._stack_depth = stack_depth
        super().__init__(bus)

    def _create_initial_state(self) -> Chip8State:
        return Chip8State(stack_depth=self._stack_depth)

    # @intent:responsibility PCが指す2バイトをビッグエンディアンのワードとして読み込みます。
    def _fetch(self) -> int:
        return read_word(self._bus, self._state.pc)

    def _decode(self, word: int) -> Operation:
        return decode_opcode(word)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus)

    # @intent:responsibility 外部から渡されたキーパッドのスナップショットを状態に反映します。
    def set_keypad(self, keys_down: Iterable[int], keys_released: Iterable[int]) -> None:
        self._state.keys_down = frozenset(keys_down)
        self._state.keys_released = frozenset(keys_released)

    # @intent:responsibility 遅延タイマーとサウンドタイマーを1つずつ減算します（0で止まります）。
    def tick_timers(self) -> None:
        s = self._state
        if s.delay > 0:
            s.delay -= 1
        if s.sound > 0:
            s.sound -= 1

    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{i:X}": value for i, value in enumerate(s.v)}
        registers.update({
            "I": s.idx, "PC": s.pc, "SP": len(s.stack), "DT": s.delay, "ST": s.sound
        })
        return registers
