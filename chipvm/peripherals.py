import random

from typing import List, Optional, Protocol

from chipvm.constants import KEY_COUNT, BYTE_MASK


class KeyStateProvider(Protocol):
    def is_held(self, key: int) -> bool:
        ...


class RandomSource(Protocol):
    def next_byte(self) -> int:
        ...


class Keypad:
    """
    The held / released state of the 16 keys of the hexadecimal keypad, updated by the host.
    """
    def __init__(self):
        self.keys: List[bool] = [False] * KEY_COUNT

    def is_held(self, key: int) -> bool:
        return self.keys[key]

    def set_key(self, key: int, pressed: bool) -> None:
        self.keys[key] = pressed

    def release_all(self) -> None:
        self.keys = [False] * KEY_COUNT


class RandomByteSource:
    """
    Random numbers [0, 255] for the random opcode.  Seed it to make a run reproducible.
    """
    def __init__(self, seed: Optional[int] = None):
        self.generator = random.Random(seed)

    def next_byte(self) -> int:
        return self.generator.randint(0, BYTE_MASK)
