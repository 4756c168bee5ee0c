"""NVIDIA driver chooser and installer."""

from __future__ import annotations

import curses
import subprocess
import threading
import time
from dataclasses import dataclass
from typing import Callable

from .theme import Rect, draw_gauge, draw_paragraph, split_vertical


def driver_list():
    """The driver packages offered for installation."""
    return ["nvidia (stable)", "nvidia-beta", "nvidia-open", "nvidia-390xx"]


def install_script(driver_name):
    """Shell script that installs a driver package and rebuilds the initramfs."""
    return (
        "\nset -e\n"
        f"sudo aura -A --noconfirm {driver_name}\n"
        "sudo mkinitcpio -P\n"
    )


def _run_bash(script):
    result = subprocess.run(["bash", "-c", script], capture_output=True)
    return result.stdout.decode("utf-8", errors="replace")


@dataclass
class DriverInstaller:
    """Driver selection and installation progress; ``step_delay`` is seconds per percent."""

    runner: Callable[[str], str] = _run_bash
    step_delay: float = 0.04
    selection_active: bool = False
    selected: int = 0
    installing: bool = False
    progress: int = 0
    message: str = ""

    def enter(self):
        self.selection_active = True
        self.selected = 0
        self.message = "Select a driver to install"

    def exit(self):
        self.selection_active = False
        self.installing = False
        self.progress = 0
        self.message = ""

    def increment(self):
        if self.selected < len(driver_list()) - 1:
            self.selected += 1

    def decrement(self):
        if self.selected > 0:
            self.selected -= 1

    def install(self):
        """Install the selected driver in a background thread and return it."""
        self.installing = True
        self.progress = 0
        self.message = "Installing driver..."
        driver_name = driver_list()[self.selected]
        worker = threading.Thread(target=self._install, args=(driver_name,), daemon=True)
        worker.start()
        return worker

    def _install(self, driver_name):
        started = time.monotonic()
        self.message = f"Installing: {driver_name}"
        try:
            stdout = self.runner(install_script(driver_name))
            error = None
        except OSError as exc:
            stdout = ""
            error = exc

        for percent in range(101):
            self.progress = percent
            time.sleep(self.step_delay)

        if error is None:
            elapsed = time.monotonic() - started
            self.message = (
                f"Driver installed successfully in {elapsed:.1f}s\n\n{stdout}\n\nReboot required."
            )
        else:
            self.message = f"Driver install failed: {error}"
        # The output screen stays up until the user leaves it.
        self.installing = True

    def draw_output(self, win):
        height, width = win.getmaxyx()
        gauge_area, text_area = split_vertical(Rect(0, 0, width, height).inner(2), [3, None])
        draw_gauge(win, gauge_area, "Install Progress", self.progress, curses.COLOR_GREEN)
        draw_paragraph(win, text_area, "Status", self.message)