import os
import tempfile
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from retro_chip8.ui.app import main, parse_args

class TestApp(unittest.TestCase):
    def test_parse_args(self):
        args = parse_args(["game.ch8", "--config", "machine.yaml", "--no-audio", "-v"])
        self.assertEqual(args.rom, "game.ch8")
        self.assertEqual(args.config, "machine.yaml")
        self.assertTrue(args.no_audio)
        self.assertTrue(args.verbose)

    def test_defaults(self):
        args = parse_args(["game.ch8"])
        self.assertIsNone(args.config)
        self.assertFalse(args.no_audio)
        self.assertFalse(args.verbose)

    def test_missing_rom_exits_with_error(self):
        """
        ROMが読み込めない場合はウィンドウを開かずに終了コード1を返すことを検証します。
        """
        self.assertEqual(main(["/nonexistent/path/to/game.ch8", "--no-audio"]), 1)

    def test_malformed_config_exits_with_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            config = os.path.join(tmp, "machine.yaml")
            with open(config, "w") as f:
                f.write("keymap: [\n")
            self.assertEqual(main([os.path.join(tmp, "game.ch8"), "--config", config, "--no-audio"]), 1)

if __name__ == '__main__':
    unittest.main()
