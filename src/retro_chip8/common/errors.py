"""
例外階層の定義。

仮想マシンの実行を継続できない状態は全てここで定義された例外として通知されます。
警告レベルは存在せず、命令セット外の入力は常にエラーです。
"""
from typing import Optional


# @intent:responsibility 本パッケージが送出する全ての例外の基底クラスです。
class Chip8Error(Exception):
    pass


# @intent:responsibility 命令ストリームが未定義の位置に達したことを示す致命的エラーです。
class MalformedProgramError(Chip8Error):
    pass


class InvalidInstructionError(MalformedProgramError):
    """
    どの命令パターンにも一致しないワードを実行しようとした場合に送出されます。
    """
    def __init__(self, word: int, pc: int):
        super().__init__(f"invalid instruction {word:04X} at {pc:#05x}")
        self.word = word
        self.pc = pc


class StackUnderflowError(MalformedProgramError):
    """
    空のコールスタックに対してリターンを実行した場合に送出されます。
    """
    def __init__(self, pc: int):
        super().__init__(f"tried to pop an empty stack at {pc:#05x}")
        self.pc = pc


class StackOverflowError(MalformedProgramError):
    """
    コールスタックの最大深度を超えてサブルーチンを呼び出した場合に送出されます。
    """
    def __init__(self, pc: int, depth: int):
        super().__init__(f"call stack exceeded {depth} entries at {pc:#05x}")
        self.pc = pc
        self.depth = depth


class ProgramTooLargeError(MalformedProgramError):
    def __init__(self, size: int, capacity: int):
        super().__init__(f"program of {size} bytes does not fit in {capacity} bytes of memory")
        self.size = size
        self.capacity = capacity


# @intent:responsibility ホスト側の表示・音声デバイスが利用できないことを示します。
# @intent:rationale VMのバグではなく実行環境の問題であるため、元の例外を__cause__として保持します。
class CollaboratorError(Chip8Error):
    def __init__(self, collaborator: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"{collaborator}: {message}")
        self.collaborator = collaborator
        self.__cause__ = cause


class ConfigError(Chip8Error):
    pass
