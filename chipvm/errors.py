class EmulatorError(Exception):
    """
    Base class for every error raised by the emulator.
    """


class RomLoadError(EmulatorError):
    """
    The requested game could not be read.  The machine state is never touched when this is raised.
    """


class InvalidOpcodeError(EmulatorError):
    def __init__(self, opcode: int, address: int):
        super().__init__(f"Unimplemented / Invalid Opcode: {opcode:04x} at address {address:#05x}.")
        self.opcode = opcode
        self.address = address


class StackError(EmulatorError):
    pass


class StackOverflowError(StackError):
    def __init__(self, address: int, return_address: int):
        super().__init__(f"Tried to call the subroutine at {address:#05x} from {return_address:#05x} with a full stack.")
        self.address = address
        self.return_address = return_address


class StackUnderflowError(StackError):
    def __init__(self):
        super().__init__("Tried to return from a subroutine when the stack is empty.")


class MemoryAccessError(EmulatorError):
    def __init__(self, address: int):
        super().__init__(f"Memory address {address:#x} is outside of the addressable range.")
        self.address = address
