import logging

from typing import List

from chipvm.constants import MEMORY_SIZE, REGISTER_COUNT, STACK_SIZE, GAME_START_ADDRESS, PROGRAM_CAPACITY, FONT
from chipvm.errors import MemoryAccessError, StackOverflowError, StackUnderflowError
from chipvm.framebuffer import Framebuffer

logger = logging.getLogger(__name__)


class VMState:
    """
    All the mutable state of the virtual machine: memory, registers, stack, timers and the framebuffer.
    """
    def __init__(self):
        """
        Constructor.
        """
        self.ram = bytearray(MEMORY_SIZE)
        self.registers = bytearray(REGISTER_COUNT)
        self.register_i = 0
        self.delay = 0
        self.sound = 0
        self.program_counter = GAME_START_ADDRESS
        self.stack: List[int] = [0] * STACK_SIZE
        self.stack_pointer = 0
        self.framebuffer = Framebuffer()

        self.reset()

    def reset(self) -> None:
        """
        Reset the state of the machine and load the digit sprites.  The framebuffer keeps its subscribers.
        """
        self.register_i = 0
        self.delay = 0
        self.sound = 0
        self.program_counter = GAME_START_ADDRESS
        self.stack_pointer = 0
        self.stack = [0] * STACK_SIZE

        self.ram = bytearray(MEMORY_SIZE)
        self.registers = bytearray(REGISTER_COUNT)

        self.load_digit_sprites()
        self.framebuffer.clear()

    def load_digit_sprites(self) -> None:
        """
        Load the sprites for the hexadecimal digits 0-f into memory.
        """
        self.ram[0:len(FONT)] = FONT

    def load_program(self, program: bytes) -> int:
        """
        Copy the program into memory at the game start address.  Anything past the end of memory is dropped.
        :param program: The raw bytes of the game.
        :return: The number of bytes written.
        """
        loaded = program[:PROGRAM_CAPACITY]
        self.ram[GAME_START_ADDRESS:GAME_START_ADDRESS + len(loaded)] = loaded
        if len(loaded) < len(program):
            logger.warning(f"Program of {len(program)} bytes truncated to the {PROGRAM_CAPACITY} bytes of available memory.")
        logger.debug(f"Loaded {len(loaded)} bytes at {hex(GAME_START_ADDRESS)}.")
        return len(loaded)

    @property
    def is_sound_on(self) -> bool:
        return self.sound > 0

    # region Memory
    @staticmethod
    def check_address(address: int) -> None:
        if not 0 <= address < MEMORY_SIZE:
            raise MemoryAccessError(address)

    def read_bytes(self, address: int, count: int) -> bytes:
        """
        Read a block of consecutive bytes, the whole block having to lie within memory.
        :param address: The first address to read.
        :param count: The number of bytes to read.
        :return: The bytes read.
        """
        if count > 0:
            self.check_address(address)
            self.check_address(address + count - 1)
        return bytes(self.ram[address:address + count])

    def write_bytes(self, address: int, values: bytes) -> None:
        if values:
            self.check_address(address)
            self.check_address(address + len(values) - 1)
        self.ram[address:address + len(values)] = values
    # endregion

    # region Stack
    def push(self, return_address: int, target: int) -> None:
        """
        Save the return address of a subroutine call on the stack.
        :param return_address: The address to save.
        :param target: The address of the called subroutine, reported if the stack is full.
        """
        if self.stack_pointer >= len(self.stack):
            raise StackOverflowError(target, return_address)
        self.stack[self.stack_pointer] = return_address
        self.stack_pointer += 1

    def pop(self) -> int:
        """
        Remove the most recently saved return address from the stack.
        :return: The saved address.
        """
        if self.stack_pointer == 0:
            raise StackUnderflowError()
        self.stack_pointer -= 1
        return self.stack[self.stack_pointer]
    # endregion

    def dump_memory(self, start: int = 0, end: int = MEMORY_SIZE, width: int = 16) -> List[str]:
        """
        Format a region of memory as lines of hexadecimal bytes, each prefixed by its address.
        """
        return [f"{address:03x}: {self.ram[address:min(address + width, end)].hex(' ')}" for address in range(start, end, width)]
