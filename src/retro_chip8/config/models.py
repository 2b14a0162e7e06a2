from dataclasses import dataclass, field
from typing import List

# @intent:constant 論理キー0x0-0xFに対応する物理キー名（Qt.Key_<名前>）。
DEFAULT_KEYMAP = [
    "X", "1", "2", "3",
    "Q", "W", "E", "A",
    "S", "D", "Z", "C",
    "4", "R", "F", "V",
]

@dataclass
class AudioConfig:
    enabled: bool = True

@dataclass
class MachineConfig:
    cycles_per_frame: int = 100
    frame_rate: int = 60
    stack_depth: int = 16
    audio: AudioConfig = field(default_factory=AudioConfig)
    keymap: List[str] = field(default_factory=lambda: list(DEFAULT_KEYMAP))
