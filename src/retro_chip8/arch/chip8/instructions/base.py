# src/retro_chip8/arch/chip8/instructions/base.py
"""
CHIP-8命令実装用の共通ユーティリティ。
"""
from typing import NamedTuple

from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import ADDRESS_MASK

# @intent:data_structure 16bit命令ワードから導出される全てのビットフィールド。
class Fields(NamedTuple):
    op: int       # bits 15-12
    x: int        # bits 11-8
    y: int        # bits 7-4
    n: int        # bits 3-0
    value: int    # bits 7-0 (NN)
    address: int  # bits 11-0 (NNN)

# @intent:utility_function 命令ワードを全てのビットフィールドに分解します。
# @intent:rationale どの命令が必要とするかに関わらず、全フィールドを毎回無条件に計算します。
def decode_fields(word: int) -> Fields:
    """
    16bit命令ワード（ビッグエンディアン）からop/x/y/n/value/addressを取り出します。
    任意の16bit値に対して定義される純粋関数です。
    """
    word &= 0xFFFF
    return Fields(
        op=(word >> 12) & 0xF,
        x=(word >> 8) & 0xF,
        y=(word >> 4) & 0xF,
        n=word & 0xF,
        value=word & 0xFF,
        address=word & 0xFFF,
    )

# @intent:utility_function 計算されたアドレスを4KBの空間に収めます。
def mask_address(address: int) -> int:
    return address & ADDRESS_MASK

# @intent:utility_function バスから16bitワードをビッグエンディアン形式で読み込みます。
def read_word(bus: Bus, addr: int) -> int:
    """上位バイトを先に読む16bit読み込み。"""
    return (bus.read(mask_address(addr)) << 8) | bus.read(mask_address(addr + 1))
