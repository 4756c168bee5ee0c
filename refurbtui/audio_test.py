"""Audio output test: plays a sample and shows progress."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Callable, ClassVar

from .keyboard_test import _DeviceChooser
from .stress_test import _count_to_full, _in_background

DEFAULT_SOUND = "assets/audio/test.wav"


def play_test_sound(path):
    """Play a sound file to the end; return whether it could be played."""
    if not os.path.isfile(path):
        return False
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    try:
        import pygame
    except ImportError:
        return False
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    try:
        sound = pygame.mixer.Sound(path)
        channel = sound.play()
        while channel is not None and channel.get_busy():
            time.sleep(0.05)
        return True
    except pygame.error:
        return False
    finally:
        pygame.mixer.quit()


@dataclass
class AudioTest(_DeviceChooser):
    """State of the audio test screen; ``step_delay`` is seconds per percent."""

    list_title: ClassVar[str] = "Select Audio Output"
    info_title: ClassVar[str] = "Audio Test Info"
    run_template: ClassVar[str] = (
        "Starting test on: {device}\n(Audio response test in development)"
    )

    player: Callable[[str], bool] = play_test_sound
    sound_path: str = DEFAULT_SOUND
    step_delay: float = 0.02
    progress: int = 0

    def enter(self):
        """Open the screen and play the test sound in the background."""
        self._open(["Speakers", "Headphones"], "Playing audio test...")
        self.progress = 0
        return _in_background(self._play)

    def _play(self):
        self.player(self.sound_path)
        _count_to_full(self, self.step_delay)
        self.message = "Audio test completed."

    def exit(self):
        """Close the screen and reset the progress."""
        self._close()
        self.progress = 0

    def run(self):
        """Start a test on the selected output."""
        self._run_on_selected()

    def increment(self):
        """Move the selection down."""
        self._select_next()

    def decrement(self):
        """Move the selection up."""
        self._select_previous()

    def draw(self, win):
        """Draw the output list, the progress bar and the info box."""
        self._render(win)

    def _gauge(self):
        return ("Progress", self.progress)