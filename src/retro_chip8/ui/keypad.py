"""
キーパッドモジュール。

物理キーのイベントを16個の論理キー(0x0-0xF)の押下状態に変換し、
フレームごとのスナップショットとして提供します。
"""
from typing import Dict, List, Optional, Set, Tuple

from PySide6.QtCore import Qt

from retro_chip8.common.errors import ConfigError
from retro_chip8.common.types import KeySet

# @intent:responsibility キー名の並び（論理キー順）から、Qtのキーコード→論理キーの対応表を作ります。
def build_key_lookup(keymap: List[str]) -> Dict[int, int]:
    lookup: Dict[int, int] = {}
    for logical, name in enumerate(keymap):
        qt_key = getattr(Qt.Key, f"Key_{name}", None)
        if qt_key is None:
            raise ConfigError(f"Unknown key name '{name}' for logical key {logical:X}")
        lookup[int(qt_key)] = logical
    return lookup

# @intent:responsibility 論理キーの押下状態と、前回のスナップショット以降に離されたキーを追跡します。
class KeypadState:
    def __init__(self, keymap: List[str]):
        self._lookup = build_key_lookup(keymap)
        self._down: Set[int] = set()
        self._released: Set[int] = set()

    def logical_key(self, qt_key: int) -> Optional[int]:
        return self._lookup.get(int(qt_key))

    def press(self, qt_key: int) -> bool:
        logical = self.logical_key(qt_key)
        if logical is None:
            return False
        self._down.add(logical)
        return True

    def release(self, qt_key: int) -> bool:
        logical = self.logical_key(qt_key)
        if logical is None:
            return False
        self._down.discard(logical)
        self._released.add(logical)
        return True

    # @intent:responsibility 現在の押下集合と、前回以降に離された集合を返します。離された集合はここでクリアされます。
    def snapshot(self) -> Tuple[KeySet, KeySet]:
        released = frozenset(self._released)
        self._released.clear()
        return frozenset(self._down), released
