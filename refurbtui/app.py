"""The application: screen dispatch, key handling and the terminal loop."""

from __future__ import annotations

import argparse
import curses
from dataclasses import dataclass, field
from typing import Callable, Optional

from .gpu_test import GpuTest
from .menu import MainMenu
from .menu_disk import draw_disk_selection
from .menu_gpu import DriverMenu
from .menu_input import InputTests
from .photo_exporter import PhotoExporter
from .smart import SmartState
from .stability_test import start_stability_test
from .stress_test import StressTest

_ENTER_KEYS = {curses.KEY_ENTER, 10, 13}
_POLL_MS = 100


@dataclass
class App:
    """All screen state; the first active screen receives keys and is drawn."""

    menu: MainMenu = field(default_factory=MainMenu)
    smart: SmartState = field(default_factory=SmartState)
    inputs: InputTests = field(default_factory=InputTests)
    drivers: DriverMenu = field(default_factory=DriverMenu)
    exporter: PhotoExporter = field(default_factory=PhotoExporter)
    stress: StressTest = field(default_factory=StressTest)
    start_stability: Callable[[], object] = start_stability_test
    gpu_test: Optional[GpuTest] = None

    def __post_init__(self):
        if self.gpu_test is None:
            self.gpu_test = GpuTest(stress=self.stress, start_stability=self.start_stability)

    @property
    def _driver_selecting(self):
        return self.drivers.installer.selection_active

    def handle_enter(self):
        """Act on the selected main menu entry; return False when the user chose to leave."""
        option = self.menu.selected_option()
        if option == "Run SMART Test":
            self.smart.enter_disk_selection()
        elif option in ("AMD GPU Test", "NVIDIA GPU Test"):
            self.drivers.enter()
        elif option == "Photo Exporter":
            self.exporter.run()
        elif option == "NVIDIA Driver Installer":
            self.drivers.installer.enter()
        elif option == "Keyboard Test":
            self.inputs.keyboard.enter()
        elif option == "Gamepad Test":
            self.inputs.gamepad.enter()
        elif option == "Audio Test":
            self.inputs.audio.enter()
        elif option == "Exit":
            return False
        return True

    def handle_key(self, key):
        """Handle one key press; return False when the application should quit."""
        if isinstance(key, str):
            key = ord(key)
        if key == ord("q"):
            return self._handle_quit()
        if key == curses.KEY_UP:
            if self.smart.active:
                self.smart.scroll_up()
            elif self.smart.disk_selection_active:
                self.smart.previous_drive()
            elif self.inputs.active():
                self.inputs.decrement()
            elif self._driver_selecting:
                self.drivers.installer.decrement()
            else:
                self.menu.decrement()
        elif key == curses.KEY_DOWN:
            if self.smart.active:
                self.smart.scroll_down()
            elif self.smart.disk_selection_active:
                self.smart.next_drive()
            elif self.inputs.active():
                self.inputs.increment()
            elif self._driver_selecting:
                self.drivers.installer.increment()
            else:
                self.menu.increment()
        elif key in _ENTER_KEYS:
            if self.smart.disk_selection_active:
                self.smart.run_on_selected()
            elif self.inputs.active():
                self.inputs.launch()
            elif self._driver_selecting:
                self.drivers.installer.install()
            else:
                return self.handle_enter()
        elif key == ord("s"):
            self.stress.start()
        elif key == ord("t"):
            self.start_stability()
        return True

    def _handle_quit(self):
        if self.smart.active:
            self.smart.exit_output()
        elif self.smart.disk_selection_active:
            self.smart.exit_disk_selection()
        elif self.inputs.active():
            self.inputs.exit()
        elif self._driver_selecting:
            self.drivers.installer.exit()
        elif self.exporter.active:
            self.exporter.exit()
        elif self.gpu_test.active:
            self.gpu_test.clear()
        elif self.stress.active:
            self.stress.stop()
        else:
            return False
        return True

    def draw(self, win):
        if self.smart.disk_selection_active:
            draw_disk_selection(win, self.smart)
        elif self.inputs.active():
            self.inputs.draw(win)
        elif self._driver_selecting:
            self.drivers.draw(win)
        elif self.drivers.installer.installing:
            self.drivers.installer.draw_output(win)
        elif self.smart.active:
            self.smart.draw_output(win)
        elif self.exporter.active:
            self.exporter.draw(win)
        elif self.gpu_test.active:
            self.gpu_test.draw(win)
        elif self.stress.active:
            self.stress.draw(win)
        else:
            self.menu.draw(win)


def _setup_terminal(stdscr):
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    if curses.has_colors():
        curses.start_color()
        try:
            curses.use_default_colors()
        except curses.error:
            pass
    stdscr.keypad(True)
    stdscr.timeout(_POLL_MS)


def run_app(stdscr, app):
    """Draw and handle keys until the user quits."""
    _setup_terminal(stdscr)
    while True:
        stdscr.erase()
        app.draw(stdscr)
        stdscr.refresh()
        key = stdscr.getch()
        if key == -1:
            continue
        if not app.handle_key(key):
            break


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="refurbtui",
        description="Terminal testing suite for refurbishing computers.",
    )
    parser.parse_args(argv)
    curses.wrapper(run_app, App())
    return 0