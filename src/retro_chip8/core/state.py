# retro_chip8/core/state.py
"""
Core Layer (CPU状態の基底)
"""
from dataclasses import dataclass

# @intent:responsibility 命令サイクルが直接扱うレジスタ（PC）だけを持つ基底状態。
@dataclass
class CpuState:
    # 16bit幅で保持し、メモリへのアクセス時にアドレス幅へ切り詰める
    pc: int = 0x0000
