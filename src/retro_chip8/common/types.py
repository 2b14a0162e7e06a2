"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスなどを定義します。
"""
from typing import FrozenSet, Sequence

# @intent:data_structure 論理キー(0x0-0xF)の集合。キーパッドのスナップショットで使用されます。
KeySet = FrozenSet[int]

# @intent:data_structure フレームバッファの行列。1行は64bit整数で、bit63が左端のピクセルです。
FrameRows = Sequence[int]
