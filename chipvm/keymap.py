import pygame

from typing import Optional

# Host keyboard to hexadecimal keypad, keeping the keypad's 4x4 shape:
# 1 2 3 C     1 2 3 4
# 4 5 6 D     Q W E R
# 7 8 9 E     A S D F
# A 0 B F     Z X C V
KEY_LOOKUP = {
    pygame.K_1: 1,
    pygame.K_q: 4,
    pygame.K_a: 7,
    pygame.K_z: 10,
    pygame.K_2: 2,
    pygame.K_w: 5,
    pygame.K_s: 8,
    pygame.K_x: 0,
    pygame.K_3: 3,
    pygame.K_e: 6,
    pygame.K_d: 9,
    pygame.K_c: 11,
    pygame.K_4: 12,
    pygame.K_r: 13,
    pygame.K_f: 14,
    pygame.K_v: 15,
}


def translate_key(host_key: int) -> Optional[int]:
    """
    Get the keypad key bound to a pygame key code.
    :param host_key: The pygame key code.
    :return: The keypad key [0, 15], or None if the key is not bound.
    """
    return KEY_LOOKUP.get(host_key, None)
