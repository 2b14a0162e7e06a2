# src/retro_chip8/ui/app.py
"""
アプリケーションのエントリポイント。
設定とROMを読み込み、仮想マシンを組み立ててメインウィンドウを起動します。
"""
import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from retro_chip8.common.errors import Chip8Error
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.builder import SystemBuilder
from retro_chip8.config.models import MachineConfig
from retro_chip8.loader.loader import RomLoader
from retro_chip8.runtime.machine import Machine
from .audio import ToneOutput
from .display_view import DisplayView
from .keypad import KeypadState
from .main_window import MainWindow

logger = logging.getLogger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="Run a CHIP-8 program.")
    parser.add_argument("rom", help="path to the program image")
    parser.add_argument("--config", help="YAML machine configuration")
    parser.add_argument("--no-audio", action="store_true", help="do not open an audio output device")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every executed instruction")
    return parser.parse_args(argv)

# @intent:responsibility アプリケーションを起動し、終了コードを返します。
def main(argv: Optional[List[str]] = None) -> int:
    """
    アプリケーションのメイン関数。
    ウィンドウが閉じられた場合は0、致命的エラーの場合は1を返します。
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        config = ConfigLoader().load_from_file(args.config) if args.config else MachineConfig()
        cpu, bus = SystemBuilder().build_system(config)
        RomLoader().load_rom(args.rom, bus)
    except (OSError, Chip8Error) as e:
        logger.error("%s", e)
        return 1

    app = QApplication.instance() or QApplication(sys.argv[:1])
    try:
        keypad = KeypadState(config.keymap)
        tone = ToneOutput() if config.audio.enabled and not args.no_audio else None
    except Chip8Error as e:
        logger.error("%s", e)
        return 1

    display = DisplayView()
    machine = Machine(cpu, display=display, tone=tone, cycles_per_frame=config.cycles_per_frame)
    main_win = MainWindow(machine, display, keypad, frame_rate=config.frame_rate, tone=tone)
    main_win.show()
    main_win.start()
    app.exec()
    return main_win.exit_code

if __name__ == '__main__':
    sys.exit(main())
