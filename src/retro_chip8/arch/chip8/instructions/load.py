# src/retro_chip8/arch/chip8/instructions/load.py
"""
転送命令（即値ロード、インデックスレジスタ操作、メモリ転送）の実装。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8State
from retro_chip8.arch.chip8.fonts import glyph_address
from .base import mask_address

# --- 6XNN LD Vx, byte ---
def execute_ld_imm(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = op.value

# --- 7XNN ADD Vx, byte ---
# @intent:responsibility 即値を加算します。桁あふれは黙って折り返し、VFには触れません。
def execute_add_imm(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.value) & 0xFF

# --- ANNN LD I, addr ---
def execute_ld_i(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.idx = op.address

# --- FX1E ADD I, Vx ---
def execute_add_i(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.idx = (state.idx + state.v[op.x]) & 0xFFFF

# --- FX29 LD F, Vx ---
# @intent:responsibility Vxの下位4bitが示す16進数字のグリフをインデックスレジスタに設定します。
def execute_ld_font(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.idx = glyph_address(state.v[op.x])

# --- FX33 LD B, Vx ---
# @intent:responsibility Vxの10進表現（百の位、十の位、一の位）をI, I+1, I+2に書き込みます。
def execute_ld_bcd(state: Chip8State, bus: Bus, op: Operation) -> None:
    number = state.v[op.x]
    bus.write(mask_address(state.idx), number // 100)
    bus.write(mask_address(state.idx + 1), (number % 100) // 10)
    bus.write(mask_address(state.idx + 2), number % 10)

# --- FX55 LD [I], Vx ---
# @intent:responsibility V0からVxまでをIから順に書き込みます。
# @intent:post-condition Iはレジスタ1つにつき1進み、合計でx+1だけ増加したまま残ります。
def execute_store_regs(state: Chip8State, bus: Bus, op: Operation) -> None:
    for i in range(op.x + 1):
        bus.write(mask_address(state.idx), state.v[i])
        state.idx = (state.idx + 1) & 0xFFFF

# --- FX65 LD Vx, [I] ---
def execute_load_regs(state: Chip8State, bus: Bus, op: Operation) -> None:
    for i in range(op.x + 1):
        state.v[i] = bus.read(mask_address(state.idx))
        state.idx = (state.idx + 1) & 0xFFFF
