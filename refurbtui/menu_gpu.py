"""Menu screen for choosing an NVIDIA driver to install."""

from __future__ import annotations

from dataclasses import dataclass, field

from .nvidia_drivers import DriverInstaller, driver_list
from .theme import Rect, draw_list, draw_paragraph, split_vertical

INSTRUCTIONS = "Use ↑/↓ to choose driver. Press Enter to install. Press q to cancel."


@dataclass
class DriverMenu:
    """Driver list shown by the menu, backed by a ``DriverInstaller``."""

    installer: DriverInstaller = field(default_factory=DriverInstaller)
    drivers: list = field(default_factory=list)

    def enter(self):
        self.drivers = driver_list()

    def draw(self, win):
        if self.installer.installing:
            self.installer.draw_output(win)
            return
        height, width = win.getmaxyx()
        list_area, info_area = split_vertical(Rect(0, 0, width, height).inner(2), [3, None])
        draw_list(win, list_area, "Select NVIDIA Driver", self.drivers, self.installer.selected)
        draw_paragraph(win, info_area, "Instructions", INSTRUCTIONS)