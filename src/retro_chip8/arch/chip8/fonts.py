# src/retro_chip8/arch/chip8/fonts.py
"""
16進数字(0-F)の組み込みフォントスプライト。
"""

# @intent:constant フォント領域の先頭アドレスと1グリフあたりのバイト数。
FONT_BASE = 0x050
GLYPH_SIZE = 5

# @intent:constant 各グリフは4x5ピクセルで、各行の上位4ビットに格納されています。
FONT_SPRITES = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0, # 0
    0x20, 0x60, 0x20, 0x20, 0x70, # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0, # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0, # 3
    0x90, 0x90, 0xF0, 0x10, 0x10, # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0, # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0, # 6
    0xF0, 0x10, 0x20, 0x40, 0x40, # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0, # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0, # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90, # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0, # B
    0xF0, 0x80, 0x80, 0x80, 0xF0, # C
    0xE0, 0x90, 0x90, 0x90, 0xE0, # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0, # E
    0xF0, 0x80, 0xF0, 0x80, 0x80, # F
])

# @intent:utility_function 指定された16進数字のグリフが置かれているアドレスを返します。
def glyph_address(digit: int, font_base: int = FONT_BASE) -> int:
    return font_base + GLYPH_SIZE * (digit & 0xF)
