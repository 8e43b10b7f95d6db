# Masks
LOWER_CHAR_MASK = 15
BYTE_MASK = 255
ADDRESS_MASK = 4095
WORD_MASK = 65535

# Memory layout
MEMORY_SIZE = 4096
REGISTER_COUNT = 16
STACK_SIZE = 16
FLAG_REGISTER = 15
KEY_COUNT = 16
GAME_START_ADDRESS = 512
INTERPRETER_END_ADDRESS = 80
PROGRAM_CAPACITY = MEMORY_SIZE - GAME_START_ADDRESS

# Display
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SPRITE_WIDTH = 8

# Opcodes with no operands
CLEAR_SCREEN_OPCODE = 0x00E0
RETURN_FROM_SUBROUTINE_OPCODE = 0x00EE

# Hexadecimal digit sprites 0-f, 5 bytes each
DIGIT_SPRITE_HEIGHT = 5
FONT = bytes.fromhex(
    "f0909090f0"
    "2060202070"
    "f010f080f0"
    "f010f010f0"
    "9090f01010"
    "f080f010f0"
    "f080f090f0"
    "f010204040"
    "f090f090f0"
    "f090f010f0"
    "f090f09090"
    "e090e090e0"
    "f0808080f0"
    "e0909090e0"
    "f080f080f0"
    "f080f08080"
)
