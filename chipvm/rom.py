import logging

from pathlib import Path
from typing import Union

from chipvm.errors import RomLoadError

logger = logging.getLogger(__name__)

GAME_EXTENSIONS = (".ch8", ".chip8")


def read_rom(file_name: Union[str, Path]) -> bytes:
    """
    Read a game from disk without touching any machine state.
    :param file_name: The path of the game.
    :return: The raw bytes of the game.
    """
    if not file_name:
        raise RomLoadError("No path provided for a game to load!")

    path = Path(file_name)

    if not path.exists():
        raise RomLoadError(f"Game could not be loaded as the path does not exist!  Path: {path}.")

    if not path.is_file():
        raise RomLoadError(f"Game could not be loaded as the path is not a file!  Path: {path}.")

    if path.suffix.lower() not in GAME_EXTENSIONS:
        raise RomLoadError(f"Game does not appear to be a CHIP-8 game as none of the {', '.join(GAME_EXTENSIONS)} file types were found in the file name.  Path: {path}.")

    logger.debug(f"Loading game at path {path}.")
    try:
        with path.open("rb") as file:
            return file.read()
    except OSError as error:
        raise RomLoadError(f"Game could not be read!  Path: {path}.  Reason: {error}.") from error
