import pytest

from chipvm.errors import RomLoadError, EmulatorError
from chipvm.rom import read_rom
from chipvm.state import VMState


class TestReadRom:
    def test_read_rom(self, tmp_path):
        path = tmp_path / "pong.ch8"
        path.write_bytes(bytes.fromhex("6a026b0c"))
        assert read_rom(path) == bytes.fromhex("6a026b0c"), "Game bytes were not read verbatim."

    def test_read_rom_other_extension(self, tmp_path):
        path = tmp_path / "pong.CHIP8"
        path.write_bytes(b"\x00\xe0")
        assert read_rom(str(path)) == b"\x00\xe0", "The .chip8 extension was not accepted."

    def test_missing_file(self, tmp_path):
        with pytest.raises(RomLoadError, match="does not exist"):
            read_rom(tmp_path / "missing.ch8")

    def test_directory(self, tmp_path):
        directory = tmp_path / "games.ch8"
        directory.mkdir()
        with pytest.raises(RomLoadError, match="not a file"):
            read_rom(directory)

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"\x00\xe0")
        with pytest.raises(RomLoadError, match="does not appear to be a CHIP-8 game"):
            read_rom(path)

    def test_no_path(self):
        with pytest.raises(RomLoadError):
            read_rom("")

    def test_failed_load_leaves_state_untouched(self, tmp_path):
        state = VMState()
        before = bytes(state.ram)
        with pytest.raises(EmulatorError):
            state.load_program(read_rom(tmp_path / "missing.ch8"))
        assert bytes(state.ram) == before, "A failed load modified memory."
