# src/retro_chip8/arch/chip8/instructions/alu.py
"""
算術論理演算命令(8XYn)と乱数命令の実装。

VFへのフラグ書き込みは、必ず主結果をVxへ格納した後に行います。
VxとしてVFが指定された場合でも、最終的な値はフラグになります。
"""
import random

from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8State

# --- 8XY0 LD Vx, Vy ---
def execute_ld_reg(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.v[op.y]

# --- 8XY1 OR Vx, Vy ---
# @intent:rationale 論理演算後にVFをクリアするのは、再現対象の処理系の挙動との互換性のためです。
def execute_or(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] | state.v[op.y]
    state.vf = 0

# --- 8XY2 AND Vx, Vy ---
def execute_and(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] & state.v[op.y]
    state.vf = 0

# --- 8XY3 XOR Vx, Vy ---
def execute_xor(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] ^ state.v[op.y]
    state.vf = 0

# --- 8XY4 ADD Vx, Vy ---
# @intent:responsibility 加算結果を格納し、桁あふれをVFに設定します。
def execute_add_reg(state: Chip8State, bus: Bus, op: Operation) -> None:
    total = state.v[op.x] + state.v[op.y]
    state.v[op.x] = total & 0xFF
    state.vf = 1 if total > 0xFF else 0

# --- 8XY5 SUB Vx, Vy ---
# @intent:responsibility Vx - Vy を格納します。VFは借りが発生しなかった場合に1となります。
def execute_sub(state: Chip8State, bus: Bus, op: Operation) -> None:
    minuend, subtrahend = state.v[op.x], state.v[op.y]
    state.v[op.x] = (minuend - subtrahend) & 0xFF
    state.vf = 1 if minuend >= subtrahend else 0

# --- 8XY6 SHR Vx, Vy ---
# @intent:responsibility Vyを右シフトしてVxへ格納し、シフトアウトされたbit0をVFに設定します。
def execute_shr(state: Chip8State, bus: Bus, op: Operation) -> None:
    source = state.v[op.y]
    state.v[op.x] = source >> 1
    state.vf = source & 0x01

# --- 8XY7 SUBN Vx, Vy ---
def execute_subn(state: Chip8State, bus: Bus, op: Operation) -> None:
    minuend, subtrahend = state.v[op.y], state.v[op.x]
    state.v[op.x] = (minuend - subtrahend) & 0xFF
    state.vf = 1 if minuend >= subtrahend else 0

# --- 8XYE SHL Vx, Vy ---
# @intent:responsibility Vyを左シフトしてVxへ格納し、シフトアウトされたbit7をVFに設定します。
def execute_shl(state: Chip8State, bus: Bus, op: Operation) -> None:
    source = state.v[op.y]
    state.v[op.x] = (source << 1) & 0xFF
    state.vf = (source >> 7) & 0x01

# --- CXNN RND Vx, byte ---
def execute_rnd(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = random.randint(0, 0xFF) & op.value
