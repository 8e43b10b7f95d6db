import logging
import sys

from typing import Optional, Tuple

from chipvm.constants import (
    LOWER_CHAR_MASK, BYTE_MASK, ADDRESS_MASK, WORD_MASK, MEMORY_SIZE, FLAG_REGISTER, KEY_COUNT, SPRITE_WIDTH,
    DIGIT_SPRITE_HEIGHT, CLEAR_SCREEN_OPCODE, RETURN_FROM_SUBROUTINE_OPCODE,
)
from chipvm.errors import InvalidOpcodeError, MemoryAccessError
from chipvm.peripherals import KeyStateProvider, RandomSource, Keypad, RandomByteSource
from chipvm.state import VMState

# Set up the logging
logger = logging.getLogger(__name__)
logger.disabled = "pydevd" not in sys.modules


class Interpreter:
    """
    Fetches, decodes and executes instructions against a machine state.
    """
    def __init__(self, state: Optional[VMState] = None, keys: Optional[KeyStateProvider] = None, random_source: Optional[RandomSource] = None):
        """
        Constructor.
        :param state: The machine to run; a freshly reset one if not provided.
        :param keys: Queried for held keys by the key opcodes.
        :param random_source: Queried by the random opcode.
        """
        self.state = state if state is not None else VMState()
        self.keys = keys if keys is not None else Keypad()
        self.random_source = random_source if random_source is not None else RandomByteSource()

    # region Clock
    def tick(self) -> None:
        """
        One clock tick: count down the timers, then run exactly one instruction.
        """
        self.tick_timers()
        self.step()

    def tick_timers(self) -> None:
        """
        Decrement the delay and sound timers, stopping at 0.
        """
        state = self.state
        if state.delay > 0:
            state.delay -= 1
        if state.sound > 0:
            state.sound -= 1
            if state.sound == 0:
                logger.debug("Sound timer expired.")

    def step(self) -> int:
        """
        Fetch the current instruction, move the program counter past it, and execute it.
        :return: The executed opcode.
        """
        opcode = self.fetch()
        self.state.program_counter += 2
        self.run_opcode(opcode)
        return opcode
    # endregion

    # region Helpers
    @staticmethod
    def get_x(opcode: int) -> int:
        """
        Get the second character of the opcode, which usually names the first register.
        """
        return (opcode >> 8) & LOWER_CHAR_MASK

    @staticmethod
    def get_y(opcode: int) -> int:
        """
        Get the third character of the opcode, which usually names the second register.
        """
        return (opcode >> 4) & LOWER_CHAR_MASK

    @staticmethod
    def get_n(opcode: int) -> int:
        return opcode & LOWER_CHAR_MASK

    @staticmethod
    def get_nn(opcode: int) -> int:
        return opcode & BYTE_MASK

    @staticmethod
    def get_nnn(opcode: int) -> int:
        return opcode & ADDRESS_MASK

    @staticmethod
    def bounded_add(first: int, second: int) -> Tuple[int, int]:
        """
        Add two integers, bounded by the confines of a byte.
        :param first: The first integer.
        :param second: The second integer.
        :return: The result of the addition and the carry (1 if the sum did not fit in a byte, 0 otherwise).
        """
        sum_of_values = first + second
        return sum_of_values & BYTE_MASK, 1 if sum_of_values > BYTE_MASK else 0

    @staticmethod
    def bounded_subtract(minuend: int, subtrahend: int) -> int:
        """
        Subtract the subtrahend from the minuend, bounded by the confines of a byte.
        :param minuend: The integer from which to subtract.
        :param subtrahend: The integer to subtract.
        :return: The result of the subtraction.
        """
        return (minuend - subtrahend) & BYTE_MASK

    def skip_next_instruction(self, condition: bool) -> None:
        if condition:
            self.state.program_counter += 2
            logger.debug("Instruction skipped.")
        else:
            logger.debug("Instruction not skipped.")
    # endregion

    # region Opcodes
    def fetch(self) -> int:
        """
        Read the two bytes at the program counter as a single big-endian opcode.
        :return: The opcode.
        """
        program_counter = self.state.program_counter
        if not 0 <= program_counter < MEMORY_SIZE - 1:
            raise MemoryAccessError(program_counter)
        ram = self.state.ram
        return (ram[program_counter] << 8) | ram[program_counter + 1]

    def run_opcode(self, opcode: int) -> None:
        """
        Route the provided opcode to the correct method to execute it.  The program counter must already point past it.
        :param opcode: The opcode to execute.
        """
        first_char = opcode >> 12
        last_char = self.get_n(opcode)
        last_byte = self.get_nn(opcode)

        if opcode == CLEAR_SCREEN_OPCODE:
            self.opcode_clear_screen(opcode)
        elif opcode == RETURN_FROM_SUBROUTINE_OPCODE:
            self.opcode_return_from_subroutine(opcode)
        elif first_char == 1:
            self.opcode_goto(opcode)
        elif first_char == 2:
            self.opcode_call_subroutine(opcode)
        elif first_char == 3:
            self.opcode_if_equal(opcode)
        elif first_char == 4:
            self.opcode_if_not_equal(opcode)
        elif first_char == 5 and last_char == 0:
            self.opcode_if_register_equal(opcode)
        elif first_char == 6:
            self.opcode_set_register_value(opcode)
        elif first_char == 7:
            self.opcode_add_value(opcode)
        elif first_char == 8 and last_char == 0:
            self.opcode_set_register_value_other_register(opcode)
        elif first_char == 8 and last_char == 1:
            self.opcode_set_register_bitwise_or(opcode)
        elif first_char == 8 and last_char == 2:
            self.opcode_set_register_bitwise_and(opcode)
        elif first_char == 8 and last_char == 3:
            self.opcode_set_register_bitwise_xor(opcode)
        elif first_char == 8 and last_char == 4:
            self.opcode_add_other_register(opcode)
        elif first_char == 8 and last_char == 5:
            self.opcode_subtract_from_first_register(opcode)
        elif first_char == 8 and last_char == 6:
            self.opcode_bit_shift_right(opcode)
        elif first_char == 8 and last_char == 7:
            self.opcode_subtract_from_second_register(opcode)
        elif first_char == 8 and last_char == 14:
            self.opcode_bit_shift_left(opcode)
        elif first_char == 9 and last_char == 0:
            self.opcode_if_register_not_equal(opcode)
        elif first_char == 10:
            self.opcode_set_register_i(opcode)
        elif first_char == 11:
            self.opcode_goto_addition(opcode)
        elif first_char == 12:
            self.opcode_random_bitwise_and(opcode)
        elif first_char == 13:
            self.opcode_draw_sprite(opcode)
        elif first_char == 14 and last_byte == 0x9E:
            self.opcode_if_key_pressed(opcode)
        elif first_char == 14 and last_byte == 0xA1:
            self.opcode_if_key_not_pressed(opcode)
        elif first_char == 15 and last_byte == 0x07:
            self.opcode_get_delay_timer(opcode)
        elif first_char == 15 and last_byte == 0x0A:
            self.opcode_wait_for_key_press(opcode)
        elif first_char == 15 and last_byte == 0x15:
            self.opcode_set_delay_timer(opcode)
        elif first_char == 15 and last_byte == 0x18:
            self.opcode_set_sound_timer(opcode)
        elif first_char == 15 and last_byte == 0x1E:
            self.opcode_register_i_addition(opcode)
        elif first_char == 15 and last_byte == 0x29:
            self.opcode_set_register_i_to_hex_sprite_address(opcode)
        elif first_char == 15 and last_byte == 0x33:
            self.opcode_binary_coded_decimal(opcode)
        elif first_char == 15 and last_byte == 0x55:
            self.opcode_register_dump(opcode)
        elif first_char == 15 and last_byte == 0x65:
            self.opcode_register_load(opcode)
        else:
            raise InvalidOpcodeError(opcode, self.state.program_counter - 2)

    def opcode_clear_screen(self, opcode: int) -> None:
        """
        Clear the screen.
        :param opcode: The opcode to execute.
        """
        self.state.framebuffer.clear()
        logger.debug(f"Execute Opcode {opcode:04x}: Clearing the screen.")

    def opcode_return_from_subroutine(self, opcode: int) -> None:
        """
        Return from the current subroutine.
        :param opcode: The opcode to execute.
        """
        self.state.program_counter = self.state.pop()
        logger.debug(f"Execute Opcode {opcode:04x}: Return from subroutine, continue at {hex(self.state.program_counter)}.")

    def opcode_goto(self, opcode: int) -> None:
        """
        Jump to the provided address.
        :param opcode: The opcode to execute.
        """
        address = self.get_nnn(opcode)
        self.state.program_counter = address
        logger.debug(f"Execute Opcode {opcode:04x}: Jump to address {hex(address)}.")

    def opcode_call_subroutine(self, opcode: int) -> None:
        """
        Call the subroutine at the given address.
        :param opcode: The opcode to execute.
        """
        address = self.get_nnn(opcode)
        self.state.push(self.state.program_counter, address)
        self.state.program_counter = address
        logger.debug(f"Execute Opcode {opcode:04x}: Call subroutine at address {hex(address)}.")

    def opcode_if_equal(self, opcode: int) -> None:
        """
        Skip the next instruction if the value of the provided register is equal to the provided value.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        value = self.get_nn(opcode)
        register_value = self.state.registers[register]
        logger.debug(f"Execute Opcode {opcode:04x}: Skip next instruction if register {register}'s value ({register_value}) is {value}.")
        self.skip_next_instruction(register_value == value)

    def opcode_if_not_equal(self, opcode: int) -> None:
        """
        Skip the next instruction if the value of the provided register is not equal to the provided value.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        value = self.get_nn(opcode)
        register_value = self.state.registers[register]
        logger.debug(f"Execute Opcode {opcode:04x}: Skip next instruction if register {register}'s value ({register_value}) is not {value}.")
        self.skip_next_instruction(register_value != value)

    def opcode_if_register_equal(self, opcode: int) -> None:
        """
        Skip the next instruction if the value of the first provided register is equal to the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        first_register_value = self.state.registers[first_register]
        second_register_value = self.state.registers[second_register]
        logger.debug(f"Execute Opcode {opcode:04x}: Skip next instruction if register {first_register}'s value ({first_register_value}) is equal to register {second_register}'s value ({second_register_value}).")
        self.skip_next_instruction(first_register_value == second_register_value)

    def opcode_set_register_value(self, opcode: int) -> None:
        """
        Set the value of the provided register to the provided value.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        value = self.get_nn(opcode)
        self.state.registers[register] = value
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {register} to {value}.")

    def opcode_add_value(self, opcode: int) -> None:
        """
        Adds the provided value to the value of the provided register.  The carry flag (register 15) is not set.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        value = self.get_nn(opcode)
        self.state.registers[register], _ = self.bounded_add(self.state.registers[register], value)
        logger.debug(f"Execute Opcode {opcode:04x}: Add {value} to the value of register {register}.")

    def opcode_set_register_value_other_register(self, opcode: int) -> None:
        """
        Set the value of the first provided register to the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        second_register_value = self.state.registers[second_register]
        self.state.registers[first_register] = second_register_value
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {first_register} to the value of register {second_register}'s value ({second_register_value}).")

    def opcode_set_register_bitwise_or(self, opcode: int) -> None:
        """
        Sets the value of the first provided register to the bitwise or of itself and the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        result = self.state.registers[first_register] | self.state.registers[second_register]
        self.state.registers[first_register] = result
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {first_register} to the bitwise or of itself and the value of register {second_register} (= {result}).")

    def opcode_set_register_bitwise_and(self, opcode: int) -> None:
        """
        Sets the value of the first provided register to the bitwise and of itself and the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        result = self.state.registers[first_register] & self.state.registers[second_register]
        self.state.registers[first_register] = result
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {first_register} to the bitwise and of itself and the value of register {second_register} (= {result}).")

    def opcode_set_register_bitwise_xor(self, opcode: int) -> None:
        """
        Sets the value of the first provided register to the bitwise xor of itself and the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        result = self.state.registers[first_register] ^ self.state.registers[second_register]
        self.state.registers[first_register] = result
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {first_register} to the bitwise xor of itself and the value of register {second_register} (= {result}).")

    def opcode_add_other_register(self, opcode: int) -> None:
        """
        Sets the value of the first provided register to the sum of itself and the value of the second provided register.  The carry flag (register 15) is set.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        first_register_value = self.state.registers[first_register]
        second_register_value = self.state.registers[second_register]
        result, carry = self.bounded_add(first_register_value, second_register_value)
        self.state.registers[FLAG_REGISTER] = carry
        self.state.registers[first_register] = result
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {first_register} to the sum of itself and the value of register {second_register} ({first_register_value} + {second_register_value} = {result}, carry = {carry}).")

    def opcode_subtract_from_first_register(self, opcode: int) -> None:
        """
        Sets the value of the first provided register to the difference of itself and the value of the second provided register.
        Register 15 is set to 1 if the first value was strictly greater than the second, 0 otherwise.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        first_register_value = self.state.registers[first_register]
        second_register_value = self.state.registers[second_register]
        flag = 1 if first_register_value > second_register_value else 0
        result = self.bounded_subtract(first_register_value, second_register_value)
        self.state.registers[FLAG_REGISTER] = flag
        self.state.registers[first_register] = result
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {first_register} to the difference of itself and the value of register {second_register} ({first_register_value} - {second_register_value} = {result}, flag = {flag}).")

    def opcode_bit_shift_right(self, opcode: int) -> None:
        """
        Set the first provided register to the value of the second provided register shifted right by 1.
        Set register 15 to the least significant bit of the second register before the operation.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        second_register_value = self.state.registers[second_register]
        bit_shift = second_register_value >> 1
        least_significant_bit = second_register_value & 1
        self.state.registers[FLAG_REGISTER] = least_significant_bit
        self.state.registers[first_register] = bit_shift
        logger.debug(f"Execute Opcode {opcode:04x}: Set register {first_register} to the value of register {second_register} shifted right by 1 ({second_register_value} >> 1 = {bit_shift}, previous least significant bit = {least_significant_bit}).")

    def opcode_subtract_from_second_register(self, opcode: int) -> None:
        """
        Sets the value of the first provided register to the difference of the value of the second provided register and itself.
        Register 15 is set to 1 if the first value was strictly less than the second, 0 otherwise.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        first_register_value = self.state.registers[first_register]
        second_register_value = self.state.registers[second_register]
        flag = 1 if first_register_value < second_register_value else 0
        result = self.bounded_subtract(second_register_value, first_register_value)
        self.state.registers[FLAG_REGISTER] = flag
        self.state.registers[first_register] = result
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {first_register} to the difference of the value of register {second_register} and itself ({second_register_value} - {first_register_value} = {result}, flag = {flag}).")

    def opcode_bit_shift_left(self, opcode: int) -> None:
        """
        Set the first provided register to the value of the second provided register shifted left by 1.
        Set register 15 to the most significant bit of the second register before the operation.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        second_register_value = self.state.registers[second_register]
        bit_shift = (second_register_value << 1) & BYTE_MASK
        most_significant_bit = second_register_value >> 7
        self.state.registers[FLAG_REGISTER] = most_significant_bit
        self.state.registers[first_register] = bit_shift
        logger.debug(f"Execute Opcode {opcode:04x}: Set register {first_register} to the value of register {second_register} shifted left by 1 ({second_register_value} << 1 = {bit_shift}, previous most significant bit = {most_significant_bit}).")

    def opcode_if_register_not_equal(self, opcode: int) -> None:
        """
        Skip the next instruction if the value of the first provided register is not equal to the value of the second provided register.
        :param opcode: The opcode to execute.
        """
        first_register = self.get_x(opcode)
        second_register = self.get_y(opcode)
        first_register_value = self.state.registers[first_register]
        second_register_value = self.state.registers[second_register]
        logger.debug(f"Execute Opcode {opcode:04x}: Skip next instruction if register {first_register}'s value ({first_register_value}) is not equal to register {second_register}'s value ({second_register_value}).")
        self.skip_next_instruction(first_register_value != second_register_value)

    def opcode_set_register_i(self, opcode: int) -> None:
        """
        Sets the value of register I to the provided value.
        :param opcode: The opcode to execute.
        """
        address = self.get_nnn(opcode)
        self.state.register_i = address
        logger.debug(f"Execute Opcode {opcode:04x}: Set register I to {hex(address)}.")

    def opcode_goto_addition(self, opcode: int) -> None:
        """
        Jump to the provided address plus the value of register 0.
        :param opcode: The opcode to execute.
        """
        address = self.get_nnn(opcode)
        register_value = self.state.registers[0]
        self.state.program_counter = address + register_value
        logger.debug(f"Execute Opcode {opcode:04x}: Jump to the provided address plus the value of register 0 ({hex(address)} + {hex(register_value)} = {hex(self.state.program_counter)}).")

    def opcode_random_bitwise_and(self, opcode: int) -> None:
        """
        Set the value of the provided register to the bitwise and of the provided value and a random number [0, 255].
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        value = self.get_nn(opcode)
        random_value = self.random_source.next_byte()
        result = value & random_value
        self.state.registers[register] = result
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {register} to the bitwise and of the provided value and a random number [0, 255] ({value} & {random_value} = {result}).")

    def opcode_draw_sprite(self, opcode: int) -> None:
        """
        Draws the sprite with the provided height found at the address denoted by the value of register I to the provided x and y coordinates.
        Pixels are xor-ed onto the screen, wrapping around its edges.  The collision flag (register 15) is set to 1 if a pixel was unset, 0 otherwise.
        :param opcode: The opcode to execute.
        """
        register_x = self.get_x(opcode)
        register_y = self.get_y(opcode)
        register_x_value = self.state.registers[register_x]
        register_y_value = self.state.registers[register_y]
        height = self.get_n(opcode)
        sprite = self.state.read_bytes(self.state.register_i, height)
        framebuffer = self.state.framebuffer
        pixel_unset = 0
        for row, byte in enumerate(sprite):
            y_coordinate = (register_y_value + row) % framebuffer.height
            for column in range(SPRITE_WIDTH):
                if not (byte >> (SPRITE_WIDTH - 1 - column)) & 1:
                    continue
                x_coordinate = (register_x_value + column) % framebuffer.width
                if framebuffer.toggle(x_coordinate, y_coordinate):
                    pixel_unset = 1
        self.state.registers[FLAG_REGISTER] = pixel_unset
        logger.debug(f"Execute Opcode {opcode:04x}: Drawing the sprite with a height of {height} and found at address {hex(self.state.register_i)} to the screen at the x-coordinate from the value of register {register_x} and y-coordinate from the value of register {register_y} ({register_x_value, register_y_value}), collision = {pixel_unset}.")

    def opcode_if_key_pressed(self, opcode: int) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is pressed.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        key = self.state.registers[register] & LOWER_CHAR_MASK
        pressed = self.keys.is_held(key)
        logger.debug(f"Execute Opcode {opcode:04x}: Skip next instruction if the key represented by the value of register {register} ({key}) is pressed ({pressed}).")
        self.skip_next_instruction(pressed)

    def opcode_if_key_not_pressed(self, opcode: int) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is not pressed.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        key = self.state.registers[register] & LOWER_CHAR_MASK
        pressed = self.keys.is_held(key)
        logger.debug(f"Execute Opcode {opcode:04x}: Skip next instruction if the key represented by the value of register {register} ({key}) is not pressed ({pressed}).")
        self.skip_next_instruction(not pressed)

    def opcode_get_delay_timer(self, opcode: int) -> None:
        """
        Sets the value of the provided register to the value of the delay timer.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        self.state.registers[register] = self.state.delay
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register {register} to the value of the delay timer ({self.state.delay}).")

    def opcode_wait_for_key_press(self, opcode: int) -> None:
        """
        Store the lowest held key in the provided register.  If no key is held, the program counter is moved back so this
        opcode runs again on the next tick, which blocks the program without blocking the timers.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        for key in range(KEY_COUNT):
            if self.keys.is_held(key):
                self.state.registers[register] = key
                logger.debug(f"Execute Opcode {opcode:04x}: Key {key} is pressed, storing it in register {register}.")
                return

        self.state.program_counter -= 2
        logger.debug(f"Execute Opcode {opcode:04x}: Waiting for a keypress to store in register {register}.")

    def opcode_set_delay_timer(self, opcode: int) -> None:
        """
        Sets the delay timer to the value of the provided register.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        register_value = self.state.registers[register]
        self.state.delay = register_value
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of the delay timer to value of register {register} ({register_value}).")

    def opcode_set_sound_timer(self, opcode: int) -> None:
        """
        Sets the sound timer to the value of the provided register.  A sound plays for as long as it is greater than 0.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        register_value = self.state.registers[register]
        self.state.sound = register_value
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of the sound timer to value of register {register} ({register_value}).")

    def opcode_register_i_addition(self, opcode: int) -> None:
        """
        Add the value of the provided register to register I.  Register 15 is left untouched.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        register_value = self.state.registers[register]
        register_i_value = self.state.register_i
        self.state.register_i = (register_i_value + register_value) & WORD_MASK
        logger.debug(f"Execute Opcode {opcode:04x}: Adds the value of register {register} to the value of register I ({register_i_value} + {register_value} = {self.state.register_i}).")

    def opcode_set_register_i_to_hex_sprite_address(self, opcode: int) -> None:
        """
        Sets the value of register I to the address of the hexadecimal sprite represented by the value in the provided register.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        register_value = self.state.registers[register]
        self.state.register_i = register_value * DIGIT_SPRITE_HEIGHT
        logger.debug(f"Execute Opcode {opcode:04x}: Set the value of register I to the address ({self.state.register_i}) of the hexadecimal sprite represented by the value of register {register} ({register_value}).")

    def opcode_binary_coded_decimal(self, opcode: int) -> None:
        """
        Store the Binary Coded Decimal representation of the value of the provided register in memory, starting at the value of register I.
        Hundreds digit stored in memory at the location of the value of register I.
        Tens digit stored in memory at the location of the value of register I + 1.
        Units digit stored in memory at the location of the value of register I + 2.
        :param opcode: The opcode to execute.
        """
        register = self.get_x(opcode)
        register_value = self.state.registers[register]
        hundreds = register_value // 100 % 10
        tens = register_value // 10 % 10
        units = register_value % 10
        self.state.write_bytes(self.state.register_i, bytes((hundreds, tens, units)))
        logger.debug(f"Execute Opcode {opcode:04x}: Store the Binary Coded Decimal representation of the value of register {register} ({register_value}), starting at the value of register I ({hex(self.state.register_i)}), ({hundreds}, {tens}, {units}).")

    def opcode_register_dump(self, opcode: int) -> None:
        """
        Store the values of all registers from register 0 to the provided register in memory, starting at the value of register I.
        :param opcode: The opcode to execute.
        """
        last_register = self.get_x(opcode)
        logger.debug(f"Execute Opcode {opcode:04x}: Dumping the values of all registers from register 0 to register {last_register} into memory, starting at the value of register I ({hex(self.state.register_i)}).")
        self.state.write_bytes(self.state.register_i, bytes(self.state.registers[:last_register + 1]))

    def opcode_register_load(self, opcode: int) -> None:
        """
        Load the values of all registers from register 0 to the provided register from memory, starting at the value of register I.
        :param opcode: The opcode to execute.
        """
        last_register = self.get_x(opcode)
        logger.debug(f"Execute Opcode {opcode:04x}: Loading the values of all registers from register 0 to register {last_register} from memory, starting at the value of register I ({hex(self.state.register_i)}).")
        self.state.registers[:last_register + 1] = self.state.read_bytes(self.state.register_i, last_register + 1)
    # endregion
