# tests/config/test_config_loader.py
"""
retro_chip8.configパッケージ（YAMLローダーとSystemBuilder）の単体テスト。
"""
import pytest
import yaml
from pathlib import Path

from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import MachineConfig, DEFAULT_KEYMAP
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.arch.chip8.cpu import Chip8Cpu
from retro_chip8.arch.chip8.fonts import FONT_BASE, FONT_SPRITES
from retro_chip8.common.errors import ConfigError

# @intent:test_suite 設定ファイルの解析と、設定からのシステム構築を検証します。

@pytest.fixture
def write_config(tmp_path):
    def _write(text):
        path = tmp_path / "machine.yaml"
        path.write_text(text)
        return str(path)
    return _write

class TestConfigLoader:
    def test_load_full_config(self, write_config):
        path = write_config(
            "cycles_per_frame: 0x20\n"
            "frame_rate: 30\n"
            "stack_depth: '12'\n"
            "audio:\n"
            "  enabled: false\n"
            "keymap: [x, '1', '2', '3', q, w, e, a, s, d, z, c, '4', r, f, v]\n"
        )
        config = ConfigLoader().load_from_file(path)
        assert config.cycles_per_frame == 0x20
        assert config.frame_rate == 30
        assert config.stack_depth == 12
        assert config.audio.enabled is False
        assert config.keymap == DEFAULT_KEYMAP

    # @intent:test_case_defaults 空のファイルは既定値の設定になることを検証します。
    def test_empty_file_gives_defaults(self, write_config):
        config = ConfigLoader().load_from_file(write_config(""))
        assert config == MachineConfig()

    def test_hex_string(self, write_config):
        config = ConfigLoader().load_from_file(write_config("cycles_per_frame: '0x64'\n"))
        assert config.cycles_per_frame == 100

    @pytest.mark.parametrize("text", [
        "- 1\n- 2\n",
        "cycles_per_frame: 0\n",
        "frame_rate: -60\n",
        "stack_depth: true\n",
        "cycles_per_frame: fast\n",
        "keymap: [A, B]\n",
        "keymap: [A, A, A, A, A, A, A, A, A, A, A, A, A, A, A, A]\n",
        "audio: true\n",
        "audio: false\n",
        "audio:\n  enabled: 'no'\n",
        "keymap: [\n",
    ])
    def test_invalid_config(self, write_config, text):
        with pytest.raises(ConfigError):
            ConfigLoader().load_from_file(write_config(text))

    # @intent:test_case_yaml_error YAMLの構文エラーはConfigErrorとして報告され、元の例外を保持することを検証します。
    def test_malformed_yaml(self, write_config):
        with pytest.raises(ConfigError) as excinfo:
            ConfigLoader().load_from_file(write_config("keymap: [\n"))
        assert isinstance(excinfo.value.__cause__, yaml.YAMLError)

    def test_audio_section_may_be_empty(self, write_config):
        config = ConfigLoader().load_from_file(write_config("audio:\n"))
        assert config.audio.enabled is True

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader().load_from_file(str(tmp_path / "absent.yaml"))

class TestSystemBuilder:
    def test_build_system(self):
        cpu, bus = SystemBuilder().build_system(MachineConfig(stack_depth=8))
        assert isinstance(cpu, Chip8Cpu)
        assert cpu.get_state().stack_depth == 8
        assert bus.peek(0xFFF) == 0

    # @intent:test_case_fonts フォントが0x050から80バイト配置されることを検証します。
    def test_fonts_are_loaded(self):
        _, bus = SystemBuilder().build_system(MachineConfig())
        assert bytes(bus.peek(FONT_BASE + i) for i in range(len(FONT_SPRITES))) == bytes(FONT_SPRITES)
        assert bus.peek(FONT_BASE - 1) == 0
        assert bus.peek(FONT_BASE + 80) == 0

    def test_building_does_not_leave_bus_activity(self):
        _, bus = SystemBuilder().build_system(MachineConfig())
        assert bus.get_and_clear_activity_log() == []

def test_bundled_default_config_matches_defaults():
    path = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"
    assert ConfigLoader().load_from_file(str(path)) == MachineConfig()
