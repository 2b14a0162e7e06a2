from typing import Tuple
from retro_chip8.transport.bus import Bus, RAM
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.state import MEMORY_SIZE
from retro_chip8.arch.chip8.fonts import FONT_BASE, FONT_SPRITES
from .models import MachineConfig

# @intent:responsibility システム構成（Config）に基づいて、Bus、RAM、CPUを生成・接続し、フォントを配置します。
class SystemBuilder:
    def build_system(self, config: MachineConfig) -> Tuple[Chip8Cpu, Bus]:
        bus = Bus()
        bus.register_device(0x000, MEMORY_SIZE - 1, RAM(MEMORY_SIZE))
        bus.load(FONT_BASE, FONT_SPRITES)

        cpu = Chip8Cpu(bus, stack_depth=config.stack_depth)
        return cpu, bus
