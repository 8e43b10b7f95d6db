import os

import pygame
import pytest

from unittest import mock

from chipvm import app
from chipvm.app import Application, parse_arguments, TICK_RATE
from chipvm.constants import GAME_START_ADDRESS


class TestApplication:
    def setup_method(self):
        self.patches = [
            mock.patch.dict(os.environ, {"SDL_VIDEODRIVER": "dummy", "SDL_AUDIODRIVER": "dummy"}),
            mock.patch.object(app, "easygui"),
            mock.patch.object(app, "Display"),
            mock.patch.object(app, "Buzzer"),
        ]
        for patch in self.patches:
            patch.start()
        self.application = Application()

    def teardown_method(self):
        for patch in reversed(self.patches):
            patch.stop()
        pygame.quit()

    def test_fatal_error_halts_session(self):
        # Memory after the font is empty, so the first instruction is the invalid 0000
        self.application.game_loaded = True
        with mock.patch("pygame.event.get", side_effect=[[], [pygame.event.Event(pygame.QUIT)]]):
            self.application.event_loop()

        assert not self.application.game_loaded, "Game still marked as running after a fatal error."
        self.application.buzzer.update.assert_called_with(False)
        app.easygui.msgbox.assert_called_once()
        assert app.easygui.msgbox.call_args[0][1] == "Emulation Stopped", "Fatal error not reported to the user."
        assert "0000" in app.easygui.msgbox.call_args[0][0], "Report does not name the invalid opcode."
        self.application.display.close.assert_called_once()

    def test_halted_session_does_not_tick(self):
        with mock.patch("pygame.event.get", side_effect=[[], [], [pygame.event.Event(pygame.QUIT)]]), \
                mock.patch.object(self.application.interpreter, "tick") as mock_tick:
            self.application.event_loop()
        mock_tick.assert_not_called()

    def test_load_game_bad_path(self, tmp_path):
        state = self.application.interpreter.state
        ram_before = bytes(state.ram)

        self.application.load_game(str(tmp_path / "missing.ch8"))
        assert not self.application.game_loaded, "Game marked as loaded after a failed load."
        assert bytes(state.ram) == ram_before, "A failed load modified memory."
        assert state.program_counter == GAME_START_ADDRESS, "A failed load modified the program counter."
        app.easygui.msgbox.assert_called_once()
        assert app.easygui.msgbox.call_args[0][1] == "Game Not Loaded", "Load failure not reported to the user."
        self.application.display.set_title.assert_not_called()

    def test_load_game(self, tmp_path):
        path = tmp_path / "pong.ch8"
        path.write_bytes(bytes.fromhex("6a026b0c"))

        self.application.interpreter.state.registers[3] = 7
        self.application.load_game(str(path))
        state = self.application.interpreter.state
        assert self.application.game_loaded, "Game not marked as loaded."
        assert state.ram[GAME_START_ADDRESS:GAME_START_ADDRESS + 4] == bytes.fromhex("6a026b0c"), "Game not loaded into memory."
        assert state.registers[3] == 0, "Machine was not reset before loading."
        self.application.display.set_title.assert_called_with("pong")
        app.easygui.msgbox.assert_not_called()

    def test_load_game_picker_cancelled(self):
        app.easygui.fileopenbox.return_value = None
        self.application.load_game()
        assert not self.application.game_loaded, "Game marked as loaded without a selection."
        assert app.easygui.msgbox.call_args[0][1] == "No Game Selected", "Cancelled selection not reported to the user."

    def test_handle_key(self):
        self.application.handle_key(pygame.K_w, True)
        assert self.application.keypad.is_held(5), "W did not press keypad key 5."
        self.application.handle_key(pygame.K_w, False)
        assert not self.application.keypad.is_held(5), "W did not release keypad key 5."

    def test_load_key_opens_picker(self):
        app.easygui.fileopenbox.return_value = None
        self.application.handle_key(pygame.K_l, True)
        app.easygui.fileopenbox.assert_called_once()


class TestParseArguments:
    def test_defaults(self):
        arguments = parse_arguments([])
        assert arguments.rom is None, "A game path was set without being provided."
        assert arguments.tick_rate == TICK_RATE, "Unexpected default tick rate."
        assert arguments.seed is None and not arguments.verbose, "Unexpected default options."

    def test_options(self):
        arguments = parse_arguments(["pong.ch8", "--tick-rate", "60", "--seed", "3", "--verbose"])
        assert arguments.rom == "pong.ch8", "Game path not parsed."
        assert arguments.tick_rate == 60 and arguments.seed == 3 and arguments.verbose, "Options not parsed."

    @pytest.mark.parametrize("tick_rate", ["0", "-5"])
    def test_rejects_non_positive_tick_rate(self, tick_rate):
        with pytest.raises(SystemExit):
            parse_arguments(["--tick-rate", tick_rate])
