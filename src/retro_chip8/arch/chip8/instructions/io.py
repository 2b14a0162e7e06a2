# src/retro_chip8/arch/chip8/instructions/io.py
"""
入力（キーパッド）とタイマー命令の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8State
from .control import skip_next

# @intent:constant 待機命令が検出するキーの範囲。0xFは対象外です。
WAITABLE_KEYS = range(0x0, 0xF)

# --- EX9E SKP Vx ---
def execute_skp(state: Chip8State, bus: Bus, op: Operation) -> None:
    if (state.v[op.x] & 0xF) in state.keys_down:
        skip_next(state)

# --- EXA1 SKNP Vx ---
def execute_sknp(state: Chip8State, bus: Bus, op: Operation) -> None:
    if (state.v[op.x] & 0xF) not in state.keys_down:
        skip_next(state)

# --- FX07 LD Vx, DT ---
def execute_ld_get_delay(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.delay

# --- FX0A LD Vx, K ---
# @intent:responsibility 前回の確認以降に離されたキーのうち最小のものをVxに格納します。
# @intent:rationale 見つからない場合はPCを2戻し、次のサイクルで同じ命令を再実行することで待機を表現します。
def execute_ld_wait_key(state: Chip8State, bus: Bus, op: Operation) -> None:
    for key in WAITABLE_KEYS:
        if key in state.keys_released:
            state.v[op.x] = key
            return
    state.pc = (state.pc - op.length) & 0xFFFF

# --- FX15 LD DT, Vx ---
def execute_ld_set_delay(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.delay = state.v[op.x]

# --- FX18 LD ST, Vx ---
# @intent:responsibility サウンドタイマーを設定します。音の再生/停止はフレームランナーがこの値の0/非0の遷移から判断します。
def execute_ld_set_sound(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.sound = state.v[op.x]
