# tests/arch/chip8/test_chip8_decode.py
"""
命令デコーダの単体テスト。
"""
import pytest

from retro_chip8.arch.chip8.instructions import decode_opcode, find_instruction, UNKNOWN_MNEMONIC
from retro_chip8.arch.chip8.instructions.base import decode_fields, Fields

# @intent:test_suite ビットフィールドの分解と、順序付きパターン照合による命令の判別を検証します。

class TestDecodeFields:
    def test_fields_of_draw_word(self):
        assert decode_fields(0xD12F) == Fields(op=0xD, x=0x1, y=0x2, n=0xF, value=0x2F, address=0x12F)

    # @intent:test_case_total 全ての16bitワードについて、各フィールドがビッグエンディアンのビット配置と一致することを検証します。
    def test_fields_are_consistent_for_every_word(self):
        for word in range(0x10000):
            f = decode_fields(word)
            assert (f.op << 12) | (f.x << 8) | (f.y << 4) | f.n == word
            assert f.value == (f.y << 4) | f.n
            assert f.address == word & 0x0FFF
            assert (word >> 8, word & 0xFF) == ((f.op << 4) | f.x, f.value)

class TestDecodeOpcode:
    @pytest.mark.parametrize("word, mnemonic, operands", [
        (0x00E0, "CLS", []),
        (0x00EE, "RET", []),
        (0x01E0, "CLS", []),
        (0x0AEE, "RET", []),
        (0x1234, "JP", ["$234"]),
        (0x2ABC, "CALL", ["$ABC"]),
        (0x3A42, "SE", ["VA", "#$42"]),
        (0x5120, "SE", ["V1", "V2"]),
        (0x6005, "LD", ["V0", "#$05"]),
        (0x8124, "ADD", ["V1", "V2"]),
        (0x812E, "SHL", ["V1", "V2"]),
        (0xA300, "LD", ["I", "$300"]),
        (0xB200, "JP", ["V0", "$200"]),
        (0xD015, "DRW", ["V0", "V1", "5"]),
        (0xE59E, "SKP", ["V5"]),
        (0xF30A, "LD", ["V3", "K"]),
        (0xF233, "LD", ["B", "V2"]),
        (0xFF65, "LD", ["VF", "[I]"]),
    ])
    def test_mnemonics(self, word, mnemonic, operands):
        op = decode_opcode(word)
        assert op.mnemonic == mnemonic
        assert op.operands == operands
        assert op.word == word
        assert op.length == 2

    # @intent:test_case_ambiguity 上位ニブルが同じでも、下位ビットが定義外の場合は未知の命令になることを検証します。
    @pytest.mark.parametrize("word", [0x0000, 0x0123, 0x00E1, 0x5121, 0x8008, 0x800F, 0x9001, 0xE09F, 0xF0FF, 0xF001])
    def test_unknown_words(self, word):
        assert find_instruction(word) is None
        op = decode_opcode(word)
        assert op.mnemonic == UNKNOWN_MNEMONIC
        assert op.operands == [f"${word:04X}"]

    def test_only_clear_and_draw_end_the_frame(self):
        assert decode_opcode(0x00E0).ends_frame
        assert decode_opcode(0xD001).ends_frame
        assert not decode_opcode(0x00EE).ends_frame
        assert not decode_opcode(0x1200).ends_frame

    def test_operation_carries_fields(self):
        op = decode_opcode(0x8AB5)
        assert (op.op, op.x, op.y, op.n, op.value, op.address) == (0x8, 0xA, 0xB, 0x5, 0xB5, 0xAB5)
        assert op.opcode_hex == "8AB5"
        assert op.text() == "SUB VA, VB"
