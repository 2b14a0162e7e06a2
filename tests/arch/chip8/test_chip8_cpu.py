# tests/arch/chip8/test_chip8_cpu.py
"""
Chip8Cpu（フェッチ、スナップショット、レジスタマップ、タイマー）の単体テスト。
"""
import pytest

from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.loader.loader import RomLoader
from retro_chip8.arch.chip8.state import Chip8State, PROGRAM_START, SCREEN_HEIGHT
from retro_chip8.common.errors import InvalidInstructionError, MalformedProgramError

def build(words, config=None):
    cpu, bus = SystemBuilder().build_system(config or MachineConfig())
    RomLoader().load_bytes(b"".join(w.to_bytes(2, "big") for w in words), bus)
    return cpu, bus

class TestInitialState:
    def test_power_on_state(self):
        cpu, _ = build([])
        state = cpu.get_state()
        assert isinstance(state, Chip8State)
        assert state.pc == PROGRAM_START
        assert state.v == [0] * 16
        assert state.idx == 0
        assert state.stack == []
        assert (state.delay, state.sound) == (0, 0)
        assert state.screen == [0] * SCREEN_HEIGHT
        assert state.keys_down == frozenset()

    def test_stack_depth_from_config(self):
        cpu, _ = build([], MachineConfig(stack_depth=4))
        assert cpu.get_state().stack_depth == 4

    def test_reset_restores_power_on_state(self):
        cpu, _ = build([0x6A12, 0xA345])
        cpu.step()
        cpu.step()
        cpu.reset()
        state = cpu.get_state()
        assert state.pc == PROGRAM_START
        assert state.v[0xA] == 0
        assert state.idx == 0

class TestStep:
    # @intent:test_case_snapshot スナップショットにデコード結果とトレース文字列が記録されることを検証します。
    def test_snapshot_contents(self):
        cpu, _ = build([0x6005])
        snapshot = cpu.step()
        assert snapshot.operation.mnemonic == "LD"
        assert snapshot.operation.operands == ["V0", "#$05"]
        assert snapshot.metadata.pc == 0x200
        assert snapshot.metadata.instruction_count == 1
        assert snapshot.metadata.trace == "0200: 6005 LD V0, #$05"
        assert snapshot.state.pc == 0x202

    def test_fetch_is_big_endian(self):
        cpu, bus = build([0x1234])
        assert bus.peek(0x200) == 0x12
        assert bus.peek(0x201) == 0x34
        assert cpu.step().operation.word == 0x1234

    # @intent:test_case_invalid 未定義の命令は実行時にInvalidInstructionErrorとなり、命令アドレスを報告することを検証します。
    def test_invalid_instruction(self):
        cpu, _ = build([0x6001, 0x5121])
        cpu.step()
        with pytest.raises(InvalidInstructionError) as excinfo:
            cpu.step()
        assert excinfo.value.word == 0x5121
        assert excinfo.value.pc == 0x202
        assert isinstance(excinfo.value, MalformedProgramError)

    def test_sys_call_is_invalid(self):
        cpu, _ = build([0x0123])
        with pytest.raises(InvalidInstructionError):
            cpu.step()

class TestRegisterMap:
    def test_register_map(self):
        cpu, _ = build([0x6AFF, 0xA123, 0x2206, 0x0000, 0x0000])
        cpu.step()
        cpu.step()
        cpu.step()
        regs = cpu.get_register_map()
        assert regs["VA"] == 0xFF
        assert regs["I"] == 0x123
        assert regs["PC"] == 0x206
        assert regs["SP"] == 1
        assert set(regs) == {f"V{i:X}" for i in range(16)} | {"I", "PC", "SP", "DT", "ST"}

class TestTimers:
    def test_tick_decrements_both(self):
        cpu, _ = build([])
        state = cpu.get_state()
        state.delay, state.sound = 5, 1
        cpu.tick_timers()
        assert (state.delay, state.sound) == (4, 0)
        cpu.tick_timers()
        assert (state.delay, state.sound) == (3, 0)

    def test_set_keypad_replaces_snapshot(self):
        cpu, _ = build([])
        cpu.set_keypad([1, 2], [3])
        cpu.set_keypad([4], [])
        state = cpu.get_state()
        assert state.keys_down == frozenset({4})
        assert state.keys_released == frozenset()
