"""Dispatch for the keyboard, gamepad and audio test screens."""

from __future__ import annotations

from dataclasses import dataclass, field

from .audio_test import AudioTest
from .gamepad_test import GamepadTest
from .keyboard_test import KeyboardTest


@dataclass
class InputTests:
    """The input test screens; the first active one receives every action."""

    keyboard: KeyboardTest = field(default_factory=KeyboardTest)
    gamepad: GamepadTest = field(default_factory=GamepadTest)
    audio: AudioTest = field(default_factory=AudioTest)

    def _current(self):
        for screen in (self.keyboard, self.gamepad, self.audio):
            if screen.active:
                return screen
        return None

    def active(self):
        return self._current() is not None

    def draw(self, win):
        screen = self._current()
        if screen is not None:
            screen.draw(win)

    def exit(self):
        screen = self._current()
        if screen is not None:
            screen.exit()

    def increment(self):
        screen = self._current()
        if screen is not None:
            screen.increment()

    def decrement(self):
        screen = self._current()
        if screen is not None:
            screen.decrement()

    def launch(self):
        screen = self._current()
        if screen is not None:
            screen.run()