import logging

import numpy as np
import pygame

from chipvm.framebuffer import Framebuffer

logger = logging.getLogger(__name__)

SCALED_SCREEN_WIDTH = 800
SCALED_SCREEN_HEIGHT = 400
COLOUR_PALETTE = [(0, 0, 0), (0, 255, 0)]
WINDOW_TITLE = "ChipVM"

SOUND_FREQUENCY = 44100
SOUND_BUFFER = 4096
TONE_HZ = 550


class Display:
    """
    Presents the framebuffer in a scaled pygame window, redrawing only after pixels changed.
    """
    def __init__(self, framebuffer: Framebuffer):
        self.framebuffer = framebuffer
        self.dirty = True

        pygame.display.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self.screen = pygame.display.set_mode((SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT), 0, 8)
        self.screen.set_palette(COLOUR_PALETTE)
        self.inter_screen = pygame.Surface((framebuffer.width, framebuffer.height), 0, 8)

        framebuffer.subscribe(self.pixel_changed)

    def close(self) -> None:
        self.framebuffer.unsubscribe(self.pixel_changed)

    def pixel_changed(self, x_coordinate: int, y_coordinate: int, lit: bool) -> None:
        self.dirty = True

    def set_title(self, title: str) -> None:
        pygame.display.set_caption(title)

    def present(self) -> None:
        """
        Update the display if anything was drawn since the last update.
        """
        if not self.dirty:
            return

        pygame.surfarray.blit_array(self.inter_screen, self.framebuffer.snapshot().astype(np.ubyte))
        pygame.transform.scale(self.inter_screen, (SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT), self.screen)
        pygame.display.flip()
        self.dirty = False


def pre_init_sound() -> None:
    """
    Request the mixer settings of the tone.  Must be called before pygame.init(), which would otherwise start the mixer in stereo.
    """
    pygame.mixer.pre_init(SOUND_FREQUENCY, -16, 1, SOUND_BUFFER)


class Buzzer:
    """
    Plays a constant tone while the sound timer is running.
    """
    def __init__(self):
        pygame.mixer.init(SOUND_FREQUENCY, -16, 1, SOUND_BUFFER)
        frequency, _, channels = pygame.mixer.get_init()

        # Sound is weird; borrowing some of this chunk from here, I claim no credit for it: http://shallowsky.com/blog/programming/python-play-chords.html
        length = frequency / TONE_HZ
        omega = np.pi * 2 / length
        x_values = np.arange(int(length)) * omega
        one_cycle = SOUND_BUFFER * np.sin(x_values)
        sound_wave = np.resize(one_cycle, (frequency,)).astype(np.int16)
        if channels > 1:
            # One column per channel
            sound_wave = np.repeat(sound_wave[:, np.newaxis], channels, axis=1)
        self.sound_player = pygame.sndarray.make_sound(sound_wave)
        self.playing = False

    def update(self, sound_on: bool) -> None:
        """
        Start or stop the tone to follow the sound timer.
        :param sound_on: True if the sound timer is greater than 0.
        """
        if sound_on and not self.playing:
            self.sound_player.play(-1)
            logger.debug("Starting sound.")
        elif not sound_on and self.playing:
            self.sound_player.stop()
            logger.debug("Stopping sound.")
        self.playing = sound_on
