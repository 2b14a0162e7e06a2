import yaml
from typing import Dict, Any, List
from retro_chip8.common.errors import ConfigError
from .models import MachineConfig, AudioConfig, DEFAULT_KEYMAP

class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Malformed YAML in {path}: {e}") from e
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")

        cycles_per_frame = self._parse_int(data.get("cycles_per_frame", 100))
        frame_rate = self._parse_int(data.get("frame_rate", 60))
        stack_depth = self._parse_int(data.get("stack_depth", 16))
        for name, value in (("cycles_per_frame", cycles_per_frame),
                            ("frame_rate", frame_rate),
                            ("stack_depth", stack_depth)):
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")

        # Parse Audio
        audio_data = data.get("audio")
        if audio_data is None:
            audio_data = {}
        if not isinstance(audio_data, dict):
            raise ConfigError(f"audio must be a mapping, got {type(audio_data).__name__}")
        enabled = audio_data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise ConfigError(f"audio.enabled must be true or false, got {enabled!r}")
        audio = AudioConfig(enabled=enabled)

        keymap = self._parse_keymap(data.get("keymap", DEFAULT_KEYMAP))

        return MachineConfig(
            cycles_per_frame=cycles_per_frame,
            frame_rate=frame_rate,
            stack_depth=stack_depth,
            audio=audio,
            keymap=keymap
        )

    def _parse_keymap(self, value: Any) -> List[str]:
        if not isinstance(value, list) or len(value) != 16:
            raise ConfigError("keymap must list exactly 16 key names (keys 0x0-0xF in order)")
        keymap = [str(name).upper() for name in value]
        if len(set(keymap)) != len(keymap):
            raise ConfigError(f"keymap contains duplicate keys: {keymap}")
        return keymap

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Invalid integer format: {value}")
