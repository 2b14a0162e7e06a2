# src/retro_chip8/arch/chip8/instructions/display.py
"""
表示命令（画面消去、スプライト描画）の実装。

どちらの命令も実行後にフレームバッファを表示面へ送り、
現在の命令バッチを打ち切ります（Operation.ends_frame）。
"""
from retro_chip8.core.snapshot import Operation
from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import Chip8State, SCREEN_WIDTH, SCREEN_HEIGHT, LEFTMOST_PIXEL
from .base import mask_address

# --- 00E0 CLS ---
def execute_cls(state: Chip8State, bus: Bus, op: Operation) -> None:
    state.clear_screen()

# --- DXYN DRW Vx, Vy, nibble ---
# @intent:responsibility I から n バイトのスプライトを (Vx mod 64, Vy mod 32) へXOR合成で描画します。
# @intent:post-condition 点灯済みのピクセルを消した場合に限りVF=1。画面端を越えた行・列は折り返さずに捨てます。
def execute_drw(state: Chip8State, bus: Bus, op: Operation) -> None:
    x_pos = state.v[op.x] % SCREEN_WIDTH
    y_pos = state.v[op.y] % SCREEN_HEIGHT

    state.vf = 0

    for i in range(op.n):
        if y_pos + i >= SCREEN_HEIGHT:
            break

        sprite_row = bus.read(mask_address(state.idx + i))
        row = state.screen[y_pos + i]

        for j in range(8):
            if x_pos + j >= SCREEN_WIDTH:
                break

            if sprite_row & (0x80 >> j):
                mask = LEFTMOST_PIXEL >> (x_pos + j)
                if row & mask:
                    state.vf = 1
                row ^= mask

        state.screen[y_pos + i] = row
