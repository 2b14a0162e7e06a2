# src/retro_chip8/arch/chip8/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from typing import Optional

from retro_chip8.transport.bus import Bus
from retro_chip8.core.snapshot import Operation
from retro_chip8.arch.chip8.state import Chip8State
from retro_chip8.common.errors import InvalidInstructionError
from .base import decode_fields
from .maps import INSTRUCTION_TABLE, InstructionSpec

UNKNOWN_MNEMONIC = "UNKNOWN"

# @intent:utility_function 命令ワードに一致する最初のパターンを返します。
def find_instruction(word: int) -> Optional[InstructionSpec]:
    for spec in INSTRUCTION_TABLE:
        if word & spec.mask == spec.pattern:
            return spec
    return None

# @intent:responsibility 命令ワードをデコードし、Operationオブジェクトを返します。
def decode_opcode(word: int) -> Operation:
    """
    CHIP-8の命令ワードをデコードし、Operationオブジェクトを返します。
    どのパターンにも一致しない場合は、ニーモニックが"UNKNOWN"のOperationを返します。
    """
    fields = decode_fields(word)
    spec = find_instruction(word)
    if spec is None:
        return Operation(word=word, mnemonic=UNKNOWN_MNEMONIC, operands=[f"${word:04X}"], **fields._asdict())

    operands = []
    if spec.operand_format:
        operands = spec.operand_format.format(**fields._asdict()).split("|")
    return Operation(word=word, mnemonic=spec.mnemonic, operands=operands,
                     ends_frame=spec.ends_frame, **fields._asdict())

# @intent:responsibility デコードされたCHIP-8命令を実行します。
# @intent:post-condition 未知の命令の場合はInvalidInstructionErrorを送出します。
def execute_instruction(operation: Operation, state: Chip8State, bus: Bus) -> None:
    """
    デコードされた命令を実行し、仮想マシンの状態を変更します。
    PCは呼び出し前に命令長分進められている前提です。
    """
    spec = find_instruction(operation.word)
    if spec is None:
        raise InvalidInstructionError(operation.word, (state.pc - operation.length) & 0xFFFF)
    spec.executor(state, bus, operation)
