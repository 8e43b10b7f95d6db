import logging

import numpy as np

from typing import Callable, List

from chipvm.constants import SCREEN_WIDTH, SCREEN_HEIGHT

logger = logging.getLogger(__name__)

# Called with the x-coordinate, y-coordinate and new state of a pixel which changed.
PixelListener = Callable[[int, int, bool], None]


class Framebuffer:
    """
    The logical on / off state of every pixel of the screen, indexed as [x, y].
    Presenting the pixels is left to whoever subscribes to the changes or reads a snapshot.
    """
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.pixels = np.zeros((width, height), np.bool_)
        self.listeners: List[PixelListener] = []

    def subscribe(self, listener: PixelListener) -> None:
        """
        Register a callable to be notified of every pixel change.
        :param listener: Called with the x-coordinate, y-coordinate and new state of the pixel.
        """
        self.listeners.append(listener)

    def unsubscribe(self, listener: PixelListener) -> None:
        """
        Stop notifying the provided callable of pixel changes.
        :param listener: A previously subscribed callable.
        """
        self.listeners.remove(listener)

    def notify(self, x_coordinate: int, y_coordinate: int, lit: bool) -> None:
        for listener in self.listeners:
            listener(x_coordinate, y_coordinate, lit)

    def clear(self) -> None:
        """
        Turn every pixel off, notifying subscribers of each pixel which was lit.
        """
        lit_pixels = np.argwhere(self.pixels)
        self.pixels.fill(False)
        for x_coordinate, y_coordinate in lit_pixels:
            self.notify(int(x_coordinate), int(y_coordinate), False)

    def toggle(self, x_coordinate: int, y_coordinate: int) -> bool:
        """
        Flip the pixel at the provided coordinates, wrapping around the edges of the screen.
        :param x_coordinate: The x-coordinate of the pixel.
        :param y_coordinate: The y-coordinate of the pixel.
        :return: True if the pixel was lit and has been turned off (a collision), False otherwise.
        """
        x_coordinate %= self.width
        y_coordinate %= self.height
        collision = bool(self.pixels[x_coordinate, y_coordinate])
        self.pixels[x_coordinate, y_coordinate] = not collision
        self.notify(x_coordinate, y_coordinate, not collision)
        return collision

    def is_lit(self, x_coordinate: int, y_coordinate: int) -> bool:
        return bool(self.pixels[x_coordinate % self.width, y_coordinate % self.height])

    def lit_count(self) -> int:
        return int(np.count_nonzero(self.pixels))

    def snapshot(self) -> np.ndarray:
        """
        Get a read-only copy of the current pixels.
        :return: A boolean array of shape (width, height).
        """
        snapshot = self.pixels.copy()
        snapshot.flags.writeable = False
        return snapshot
