# retro_chip8/transport/bus.py
"""
Transport Layer (メモリバス)

4KBのアドレス空間へのバイト単位のアクセスを、登録されたデバイスへ振り分けます。
命令の実行中に発生した読み書きは記録され、1命令ごとのSnapshotに添付されます。
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple
from dataclasses import dataclass
from enum import Enum

class BusAccessType(Enum):
    READ = "READ"
    WRITE = "WRITE"

# @intent:responsibility 1回のバイトアクセスを記録します。
@dataclass(frozen=True)
class BusAccess:
    address: int
    data: int
    access_type: BusAccessType

# @intent:responsibility バスに接続できるバイトアドレス指定のデバイス。
class Device(ABC):
    """
    `read`/`write`のアドレスはデバイス先頭からのオフセットです。
    """
    @property
    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def read(self, offset: int) -> int:
        pass

    @abstractmethod
    def write(self, offset: int, data: int) -> None:
        pass

# @intent:responsibility 0で初期化された読み書き可能なメモリ。
class RAM(Device):
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int):
        if not isinstance(size, int) or size <= 0:
            raise ValueError(f"RAM size must be a positive integer, got {size!r}.")
        self._cells = bytearray(size)

    @property
    def size(self) -> int:
        return len(self._cells)

    def _check(self, offset: int) -> None:
        if not 0 <= offset < len(self._cells):
            raise IndexError(f"Offset {offset} is outside RAM of {len(self._cells)} bytes.")

    def read(self, offset: int) -> int:
        self._check(offset)
        return self._cells[offset]

    def write(self, offset: int, data: int) -> None:
        self._check(offset)
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data:#x} does not fit in a byte.")
        self._cells[offset] = data

# @intent:responsibility アドレス範囲ごとにデバイスを割り当て、アクセスを委譲・記録します。
class Bus:
    def __init__(self):
        self._regions: List[Tuple[int, int, Device]] = []
        self._activity: List[BusAccess] = []

    # @intent:pre-condition 範囲の長さとデバイスのサイズは一致している必要があります。範囲の重複は検査しません。
    def register_device(self, start_address: int, end_address: int, device: Device) -> None:
        if not isinstance(device, Device):
            raise TypeError(f"{type(device).__name__} is not a Device.")
        if start_address < 0 or end_address < start_address:
            raise ValueError(f"Invalid address range {start_address:#x}-{end_address:#x}.")
        span = end_address - start_address + 1
        if device.size != span:
            raise ValueError(
                f"{type(device).__name__} of {device.size} bytes cannot cover a range of {span} bytes."
            )
        self._regions.append((start_address, end_address, device))

    def _resolve(self, address: int) -> Tuple[Device, int]:
        for start, end, device in self._regions:
            if start <= address <= end:
                return device, address - start
        raise IndexError(f"No device mapped at {address:#05x}.")

    def read(self, address: int) -> int:
        device, offset = self._resolve(address)
        data = device.read(offset)
        self._activity.append(BusAccess(address, data, BusAccessType.READ))
        return data

    def write(self, address: int, data: int) -> None:
        device, offset = self._resolve(address)
        device.write(offset, data)
        self._activity.append(BusAccess(address, data, BusAccessType.WRITE))

    # @intent:responsibility 記録を残さずに読み出します（テストや表示用）。
    def peek(self, address: int) -> int:
        device, offset = self._resolve(address)
        return device.read(offset)

    # @intent:responsibility 連続したバイト列を記録なしで配置します。フォントとROMの配置に使います。
    def load(self, address: int, data: Iterable[int]) -> None:
        for i, byte in enumerate(data):
            device, offset = self._resolve(address + i)
            device.write(offset, byte)

    def get_and_clear_activity_log(self) -> List[BusAccess]:
        log, self._activity = self._activity, []
        return log
