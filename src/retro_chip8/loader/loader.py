# retro_chip8/loader/loader.py
"""
プログラムローダーモジュール。
ヘッダーを持たない生のバイナリ(ROM)をプログラム領域へ配置します。
"""
import logging

from retro_chip8.transport.bus import Bus
from retro_chip8.arch.chip8.state import MEMORY_SIZE, PROGRAM_START
from retro_chip8.common.errors import ProgramTooLargeError

logger = logging.getLogger(__name__)

class RomLoader:
    """
    フラットなバイト列をプログラム開始アドレス(0x200)からバスにロードするローダー。
    再配置や検証は行わず、残りのメモリに収まるかどうかだけを確認します。
    """
    def __init__(self, start_address: int = PROGRAM_START, memory_size: int = MEMORY_SIZE):
        self._start_address = start_address
        self._capacity = memory_size - start_address

    @property
    def capacity(self) -> int:
        return self._capacity

    def load_rom(self, file_path: str, bus: Bus) -> int:
        with open(file_path, 'rb') as f:
            program = f.read()
        size = self.load_bytes(program, bus)
        logger.info("Loaded %s (%d bytes) at %#05x", file_path, size, self._start_address)
        return size

    def load_bytes(self, program: bytes, bus: Bus) -> int:
        if len(program) > self._capacity:
            raise ProgramTooLargeError(len(program), self._capacity)
        bus.load(self._start_address, program)
        return len(program)
