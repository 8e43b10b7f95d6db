import argparse
import logging
import sys

import easygui
import pygame

from pathlib import Path
from typing import List, Optional

from chipvm.errors import EmulatorError, RomLoadError
from chipvm.interpreter import Interpreter
from chipvm.keymap import translate_key
from chipvm.peripherals import Keypad, RandomByteSource
from chipvm.rom import read_rom
from chipvm.display import Display, Buzzer, WINDOW_TITLE, pre_init_sound

logger = logging.getLogger(__name__)

TICK_RATE = 500
GAMES_PATH = str(Path.cwd().joinpath("games", "*.ch8"))


class Application:
    """
    Owns the window, the keypad and the interpreter, and drives the interpreter from the pygame event loop.
    """
    def __init__(self, tick_rate: int = TICK_RATE, seed: Optional[int] = None):
        """
        Constructor.
        :param tick_rate: The number of ticks to run per second.
        :param seed: Seed for the random opcode, for reproducible runs.
        """
        pre_init_sound()
        pygame.init()

        self.tick_rate = tick_rate
        self.keypad = Keypad()
        self.interpreter = Interpreter(keys=self.keypad, random_source=RandomByteSource(seed))
        self.display = Display(self.interpreter.state.framebuffer)
        self.buzzer = Buzzer()
        self.clock = pygame.time.Clock()
        self.game_loaded = False
        self.selecting_game = False

    def reset(self) -> None:
        """
        Reset the state of the emulator.
        """
        self.game_loaded = False
        self.keypad.release_all()
        self.interpreter.state.reset()
        self.buzzer.update(False)
        self.display.set_title(WINDOW_TITLE)

    def pick_game(self) -> Optional[str]:
        self.selecting_game = True
        file_name = easygui.fileopenbox(title="Select a Game", default=GAMES_PATH, filetypes=[["*.ch8", "*.chip8", "CHIP-8"]])
        self.selecting_game = False

        if not file_name:
            easygui.msgbox("Pick a game to play!  Press the L key to re-open the game picker.", "No Game Selected")
        return file_name

    def load_game(self, file_name: Optional[str] = None) -> None:
        """
        Stop any currently running game and load the selected game into memory.  The game starts on the next tick.
        :param file_name: The path of the game; a file picker is shown if not provided.
        """
        if file_name is None:
            file_name = self.pick_game()
            if not file_name:
                return

        try:
            program = read_rom(file_name)
        except RomLoadError as error:
            logger.error(str(error))
            easygui.msgbox(str(error), "Game Not Loaded")
            return

        self.reset()
        self.interpreter.state.load_program(program)
        self.display.set_title(Path(file_name).stem)
        self.game_loaded = True
        logger.info(f"Loaded game {file_name}.")

    def halt(self, error: EmulatorError) -> None:
        """
        Stop running the current game after a fatal error.  The window stays open so another game may be loaded.
        """
        state = self.interpreter.state
        self.game_loaded = False
        self.buzzer.update(False)
        logger.error(f"Emulation stopped: {error}")
        around = max(0, min(state.program_counter, len(state.ram)) - 16) & ~15
        for line in state.dump_memory(around, min(around + 48, len(state.ram))):
            logger.debug(line)
        easygui.msgbox(f"{error}\n\nPress the L key to load another game.", "Emulation Stopped")

    def handle_key(self, host_key: int, pressed: bool) -> None:
        if pressed and host_key == pygame.K_l and not self.selecting_game:
            self.load_game()
            return

        # CHIP-8 Controls
        key = translate_key(host_key)
        if key is not None:
            self.keypad.set_key(key, pressed)
            logger.debug(f"Key State Changed.  Key: {key}, Pressed: {pressed}.")

    def event_loop(self) -> None:
        """
        Loop which handles all events and ticks the interpreter at a steady rate.
        """
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.display.close()
                    pygame.quit()
                    return
                elif event.type == pygame.KEYDOWN or event.type == pygame.KEYUP:
                    self.handle_key(event.key, event.type == pygame.KEYDOWN)

            if self.game_loaded:
                try:
                    self.interpreter.tick()
                except EmulatorError as error:
                    self.halt(error)
                else:
                    self.buzzer.update(self.interpreter.state.is_sound_on)

            self.display.present()
            self.clock.tick(self.tick_rate)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chipvm", description="Run a CHIP-8 game.")
    parser.add_argument("rom", nargs="?", help="path of the game to run; a file picker is shown if omitted")
    parser.add_argument("--tick-rate", type=int, default=TICK_RATE, help=f"ticks per second (default: {TICK_RATE})")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random number generator")
    parser.add_argument("--verbose", action="store_true", help="log every key change and loaded game")
    arguments = parser.parse_args(argv)
    if arguments.tick_rate <= 0:
        parser.error("--tick-rate must be greater than 0")
    return arguments


def main(argv: Optional[List[str]] = None) -> None:
    arguments = parse_arguments(argv)

    # Set up the logging
    logging.basicConfig(level=logging.DEBUG if arguments.verbose else logging.INFO, format="[%(levelname)s]:  %(message)s", stream=sys.stdout)

    application = Application(arguments.tick_rate, arguments.seed)
    application.load_game(arguments.rom)
    application.event_loop()
