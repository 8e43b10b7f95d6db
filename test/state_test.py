import pytest

from chipvm.constants import GAME_START_ADDRESS, INTERPRETER_END_ADDRESS, PROGRAM_CAPACITY, MEMORY_SIZE, FONT
from chipvm.errors import MemoryAccessError, StackOverflowError, StackUnderflowError
from chipvm.state import VMState


class TestReset:
    def setup_method(self):
        self.state = VMState()

    def test_initial_values(self):
        assert self.state.program_counter == GAME_START_ADDRESS, "Program counter starting at an unexpected value."
        assert self.state.stack_pointer == 0, "Stack pointer starting at an unexpected value."
        assert self.state.delay == 0 and self.state.sound == 0, "Timers starting at an unexpected value."
        assert self.state.register_i == 0, "Register I starting at an unexpected value."
        assert bytes(self.state.ram[:INTERPRETER_END_ADDRESS]) == FONT, "The digit sprites were not loaded."
        assert not any(self.state.ram[INTERPRETER_END_ADDRESS:]), "Ram outside of the sprite storage was modified."
        assert not any(self.state.registers), "Register starting at an unexpected value."
        assert self.state.framebuffer.lit_count() == 0, "Screen starting with lit pixels."

    def test_reset_after_use(self):
        self.state.program_counter = 0x300
        self.state.register_i = 0x123
        self.state.delay = 10
        self.state.sound = 20
        self.state.registers[3] = 9
        self.state.push(0x202, 0x300)
        self.state.ram[0x400] = 1
        self.state.framebuffer.toggle(3, 4)

        self.state.reset()
        assert self.state.program_counter == GAME_START_ADDRESS, "Program counter not reset."
        assert self.state.register_i == 0, "Register I not reset."
        assert self.state.delay == 0 and self.state.sound == 0, "Timers not reset."
        assert self.state.stack_pointer == 0 and self.state.stack == [0] * 16, "Stack not reset."
        assert self.state.registers[3] == 0, "Registers not reset."
        assert self.state.ram[0x400] == 0, "Ram not reset."
        assert bytes(self.state.ram[:INTERPRETER_END_ADDRESS]) == FONT, "The digit sprites were not reloaded."
        assert self.state.framebuffer.lit_count() == 0, "Screen not cleared."

    def test_load_digit_sprites(self):
        self.state.ram = bytearray(4096)

        self.state.load_digit_sprites()
        assert self.state.ram[35:40] == bytes.fromhex("f010204040"), "The 7 sprite is incorrect."
        assert self.state.ram[75:80] == bytes.fromhex("f080f08080"), "The F sprite is incorrect."
        assert not any(self.state.ram[INTERPRETER_END_ADDRESS:]), "Ram outside of the sprite storage was modified."


class TestLoadProgram:
    def setup_method(self):
        self.state = VMState()

    def test_load_program(self):
        written = self.state.load_program(bytes.fromhex("00e0a22a600c"))
        assert written == 6, "Unexpected number of bytes written."
        assert self.state.ram[GAME_START_ADDRESS:GAME_START_ADDRESS + 6] == bytes.fromhex("00e0a22a600c"), "Program not loaded at the start address."
        assert self.state.ram[GAME_START_ADDRESS + 6] == 0, "Memory after the program was modified."

    def test_load_oversized_program_is_truncated(self):
        program = bytes(range(256)) * 16
        written = self.state.load_program(program)
        assert written == PROGRAM_CAPACITY, "Oversized program was not truncated to the available memory."
        assert len(self.state.ram) == MEMORY_SIZE, "Memory grew past its fixed size."
        assert self.state.ram[GAME_START_ADDRESS:] == program[:PROGRAM_CAPACITY], "Program prefix not loaded."


class TestMemoryAccess:
    def setup_method(self):
        self.state = VMState()

    def test_read_write_in_range(self):
        self.state.write_bytes(0xFFF, b"\xab")
        assert self.state.read_bytes(0xFFF, 1) == b"\xab", "Last byte of memory not writable."
        self.state.write_bytes(0xFFD, b"\x01\x02\x03")
        assert self.state.read_bytes(0xFFD, 3) == b"\x01\x02\x03", "Block at the top of memory not readable."

    @pytest.mark.parametrize("address", [-1, 0x1000, 0xFFFF])
    def test_single_byte_out_of_range(self, address):
        with pytest.raises(MemoryAccessError):
            self.state.read_bytes(address, 1)
        with pytest.raises(MemoryAccessError):
            self.state.write_bytes(address, b"\x01")

    def test_block_running_past_end_of_memory(self):
        with pytest.raises(MemoryAccessError) as error:
            self.state.read_bytes(0xFFE, 3)
        assert error.value.address == 0x1000, "Error does not report the first bad address."
        with pytest.raises(MemoryAccessError):
            self.state.write_bytes(0xFFF, b"\x01\x02")

    def test_empty_block_is_not_checked(self):
        assert self.state.read_bytes(0x1000, 0) == b"", "Reading nothing should not fail."

    def test_dump_memory(self):
        lines = self.state.dump_memory(0, 32)
        assert lines == ["000: f0 90 90 90 f0 20 60 20 20 70 f0 10 f0 80 f0 f0", "010: 10 f0 10 f0 90 90 f0 10 10 f0 80 f0 10 f0 f0 80"], "Memory dump formatted incorrectly."


class TestStack:
    def setup_method(self):
        self.state = VMState()

    def test_push_pop(self):
        self.state.push(0x202, 0x300)
        self.state.push(0x304, 0x400)
        assert self.state.stack_pointer == 2, "Stack pointer not incremented."
        assert self.state.pop() == 0x304, "Stack is not last in, first out."
        assert self.state.pop() == 0x202, "Stack is not last in, first out."
        assert self.state.stack_pointer == 0, "Stack pointer not decremented."

    def test_overflow(self):
        for depth in range(16):
            self.state.push(0x200 + depth * 2, 0x300)
        with pytest.raises(StackOverflowError) as error:
            self.state.push(0x320, 0x400)
        assert error.value.address == 0x400, "Error does not report the called subroutine."
        assert error.value.return_address == 0x320, "Error does not report the return address."
        assert self.state.stack_pointer == 16, "Failed push changed the stack pointer."

    def test_underflow(self):
        with pytest.raises(StackUnderflowError):
            self.state.pop()
        assert self.state.stack_pointer == 0, "Failed pop changed the stack pointer."


class TestSound:
    def test_is_sound_on(self):
        state = VMState()
        assert not state.is_sound_on, "Sound on with an empty sound timer."
        state.sound = 3
        assert state.is_sound_on, "Sound off with a running sound timer."
