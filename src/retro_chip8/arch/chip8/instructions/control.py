# src/retro_chip8/arch/chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、条件スキップ）の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8State
from retro_chip8.common.errors import StackUnderflowError, StackOverflowError

# @intent:utility_function 次の命令を1つ読み飛ばします。
def skip_next(state: Chip8State) -> None:
    state.pc = (state.pc + 2) & 0xFFFF

# --- 00EE RET ---
# @intent:responsibility コールスタックから戻りアドレスをポップしてPCに設定します。
# @intent:post-condition スタックが空の場合はStackUnderflowErrorを送出し、実行は継続できません。
def execute_ret(state: Chip8State, bus: Bus, op: Operation) -> None:
    if not state.stack:
        raise StackUnderflowError((state.pc - op.length) & 0xFFFF)
    state.pc = state.stack.pop()

# --- 1NNN JP addr ---
def execute_jp(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.pc = op.address

# --- 2NNN CALL addr ---
# @intent:responsibility 戻りアドレスをスタックにプッシュしてからジャンプします。
def execute_call(state: Chip8State, bus: Bus, op: Operation) -> None:
    if len(state.stack) >= state.stack_depth:
        raise StackOverflowError((state.pc - op.length) & 0xFFFF, state.stack_depth)
    # PCはstep内で既に次の命令を指している
    state.stack.append(state.pc)
    state.pc = op.address

# --- 3XNN SE Vx, byte ---
def execute_se_imm(state: Chip8State, bus: Bus, op: Operation) -> None:
    if state.v[op.x] == op.value:
        skip_next(state)

# --- 4XNN SNE Vx, byte ---
def execute_sne_imm(state: Chip8State, bus: Bus, op: Operation) -> None:
    if state.v[op.x] != op.value:
        skip_next(state)

# --- 5XY0 SE Vx, Vy ---
def execute_se_reg(state: Chip8State, bus: Bus, op: Operation) -> None:
    if state.v[op.x] == state.v[op.y]:
        skip_next(state)

# --- 9XY0 SNE Vx, Vy ---
def execute_sne_reg(state: Chip8State, bus: Bus, op: Operation) -> None:
    if state.v[op.x] != state.v[op.y]:
        skip_next(state)

# --- BNNN JP V0, addr ---
# @intent:responsibility V0をオフセットとしてジャンプします。範囲チェックは行わず16bitで折り返します。
def execute_jp_v0(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.pc = (op.address + state.v[0]) & 0xFFFF
