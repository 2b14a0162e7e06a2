# tests/transport/test_bus.py
"""
retro_chip8.transport.busモジュールの単体テスト。
"""
import pytest
from retro_chip8.transport.bus import Bus, RAM, BusAccessType

# @intent:test_suite 共通バスとRAMデバイスの基本的な機能とエラーハンドリングを検証します。

class TestRAM:
    """
    RAMデバイスの単体テスト。
    """
    # @intent:test_case_init RAMクラスが正しいサイズで初期化されることを検証します。
    def test_ram_init_valid_size(self):
        ram = RAM(16)
        assert ram.size == 16
        assert all(ram.read(i) == 0 for i in range(16)) # 全て0で初期化される

    def test_ram_init_invalid_size(self):
        with pytest.raises(ValueError, match="RAM size must be a positive integer"):
            RAM(0)
        with pytest.raises(ValueError, match="RAM size must be a positive integer"):
            RAM(1.5) # float

    # @intent:test_case_oob 境界外アドレスへのアクセス時にIndexErrorが発生することを検証します。
    def test_ram_read_write_out_of_bounds(self):
        ram = RAM(4)
        with pytest.raises(IndexError, match="Offset 4 is outside RAM of 4 bytes."):
            ram.read(4)
        with pytest.raises(IndexError, match="Offset -1 is outside RAM of 4 bytes."):
            ram.write(-1, 0x00)

    def test_ram_write_invalid_data(self):
        ram = RAM(1)
        with pytest.raises(ValueError, match="Data 0x100 does not fit in a byte."):
            ram.write(0, 0x100)

class TestBus:
    """
    Busの単体テスト。
    """
    @pytest.fixture
    def bus(self):
        bus = Bus()
        bus.register_device(0x000, 0xFFF, RAM(0x1000))
        return bus

    def test_bus_read_write(self, bus):
        bus.write(0x0200, 0xAA)
        assert bus.read(0x0200) == 0xAA
        assert bus.peek(0x0200) == 0xAA

    # @intent:test_case_unmapped マップされていないアドレスへのアクセス時にIndexErrorが発生することを検証します。
    def test_bus_access_unmapped_address(self, bus):
        with pytest.raises(IndexError, match="No device mapped at 0x1000."):
            bus.read(0x1000)

    def test_bus_register_ram_size_mismatch(self):
        bus = Bus()
        with pytest.raises(ValueError, match="RAM of 10 bytes cannot cover a range of 16 bytes."):
            bus.register_device(0x0000, 0x000F, RAM(10))

    def test_bus_register_invalid_device_type(self):
        bus = Bus()
        class MyClass: pass # Deviceを継承していない
        with pytest.raises(TypeError, match="MyClass is not a Device."):
            bus.register_device(0x0000, 0x000F, MyClass())

    # @intent:test_case_log 読み書きが順番どおりに記録され、取得時にクリアされることを検証します。
    def test_activity_log(self, bus):
        bus.write(0x0300, 0x12)
        bus.read(0x0300)
        bus.peek(0x0300) # peekは記録されない

        log = bus.get_and_clear_activity_log()
        assert [(a.address, a.data, a.access_type) for a in log] == [
            (0x0300, 0x12, BusAccessType.WRITE),
            (0x0300, 0x12, BusAccessType.READ),
        ]
        assert bus.get_and_clear_activity_log() == []

    # @intent:test_case_load ロード用APIは連続して書き込み、ログを残さないことを検証します。
    def test_load_does_not_log(self, bus):
        bus.load(0x0200, b"\x00\xE0\x12\x02")
        assert [bus.peek(0x200 + i) for i in range(4)] == [0x00, 0xE0, 0x12, 0x02]
        assert bus.get_and_clear_activity_log() == []

    def test_load_past_end_raises(self, bus):
        with pytest.raises(IndexError):
            bus.load(0x0FFF, b"\x01\x02")
