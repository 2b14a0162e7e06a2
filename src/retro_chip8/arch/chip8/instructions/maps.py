# src/retro_chip8/arch/chip8/instructions/maps.py
"""
命令パターンと命令実装のマッピング定義。
"""
from typing import Callable, List, NamedTuple

from . import alu
from . import control
from . import display
from . import io
from . import load

# @intent:data_structure 1つの命令パターン。wordがmaskでpatternに一致すれば、その命令としてデコードされます。
class InstructionSpec(NamedTuple):
    mask: int
    pattern: int
    mnemonic: str
    operand_format: str
    executor: Callable
    ends_frame: bool = False

# @intent:map 命令パターンの表。上から順に照合し、最初に一致した行を採用します。
# @intent:rationale 上位ニブルを共有する命令は下位ビット(n または value)で区別されるため、
#                  より具体的なパターンを先に置くことで照合順序の曖昧さを解決します。
INSTRUCTION_TABLE: List[InstructionSpec] = [
    # 0x0 (xニブルは照合しない)
    InstructionSpec(0xF0FF, 0x00E0, "CLS", "", display.execute_cls, ends_frame=True),
    InstructionSpec(0xF0FF, 0x00EE, "RET", "", control.execute_ret),
    # Control
    InstructionSpec(0xF000, 0x1000, "JP", "${address:03X}", control.execute_jp),
    InstructionSpec(0xF000, 0x2000, "CALL", "${address:03X}", control.execute_call),
    InstructionSpec(0xF000, 0x3000, "SE", "V{x:X}|#${value:02X}", control.execute_se_imm),
    InstructionSpec(0xF000, 0x4000, "SNE", "V{x:X}|#${value:02X}", control.execute_sne_imm),
    InstructionSpec(0xF00F, 0x5000, "SE", "V{x:X}|V{y:X}", control.execute_se_reg),
    # Load
    InstructionSpec(0xF000, 0x6000, "LD", "V{x:X}|#${value:02X}", load.execute_ld_imm),
    InstructionSpec(0xF000, 0x7000, "ADD", "V{x:X}|#${value:02X}", load.execute_add_imm),
    # ALU
    InstructionSpec(0xF00F, 0x8000, "LD", "V{x:X}|V{y:X}", alu.execute_ld_reg),
    InstructionSpec(0xF00F, 0x8001, "OR", "V{x:X}|V{y:X}", alu.execute_or),
    InstructionSpec(0xF00F, 0x8002, "AND", "V{x:X}|V{y:X}", alu.execute_and),
    InstructionSpec(0xF00F, 0x8003, "XOR", "V{x:X}|V{y:X}", alu.execute_xor),
    InstructionSpec(0xF00F, 0x8004, "ADD", "V{x:X}|V{y:X}", alu.execute_add_reg),
    InstructionSpec(0xF00F, 0x8005, "SUB", "V{x:X}|V{y:X}", alu.execute_sub),
    InstructionSpec(0xF00F, 0x8006, "SHR", "V{x:X}|V{y:X}", alu.execute_shr),
    InstructionSpec(0xF00F, 0x8007, "SUBN", "V{x:X}|V{y:X}", alu.execute_subn),
    InstructionSpec(0xF00F, 0x800E, "SHL", "V{x:X}|V{y:X}", alu.execute_shl),
    InstructionSpec(0xF00F, 0x9000, "SNE", "V{x:X}|V{y:X}", control.execute_sne_reg),
    InstructionSpec(0xF000, 0xA000, "LD", "I|${address:03X}", load.execute_ld_i),
    InstructionSpec(0xF000, 0xB000, "JP", "V0|${address:03X}", control.execute_jp_v0),
    InstructionSpec(0xF000, 0xC000, "RND", "V{x:X}|#${value:02X}", alu.execute_rnd),
    # Display
    InstructionSpec(0xF000, 0xD000, "DRW", "V{x:X}|V{y:X}|{n}", display.execute_drw, ends_frame=True),
    # Input / Timers
    InstructionSpec(0xF0FF, 0xE09E, "SKP", "V{x:X}", io.execute_skp),
    InstructionSpec(0xF0FF, 0xE0A1, "SKNP", "V{x:X}", io.execute_sknp),
    InstructionSpec(0xF0FF, 0xF007, "LD", "V{x:X}|DT", io.execute_ld_get_delay),
    InstructionSpec(0xF0FF, 0xF00A, "LD", "V{x:X}|K", io.execute_ld_wait_key),
    InstructionSpec(0xF0FF, 0xF015, "LD", "DT|V{x:X}", io.execute_ld_set_delay),
    InstructionSpec(0xF0FF, 0xF018, "LD", "ST|V{x:X}", io.execute_ld_set_sound),
    # Index / Memory
    InstructionSpec(0xF0FF, 0xF01E, "ADD", "I|V{x:X}", load.execute_add_i),
    InstructionSpec(0xF0FF, 0xF029, "LD", "F|V{x:X}", load.execute_ld_font),
    InstructionSpec(0xF0FF, 0xF033, "LD", "B|V{x:X}", load.execute_ld_bcd),
    InstructionSpec(0xF0FF, 0xF055, "LD", "[I]|V{x:X}", load.execute_store_regs),
    InstructionSpec(0xF0FF, 0xF065, "LD", "V{x:X}|[I]", load.execute_load_regs),
]
