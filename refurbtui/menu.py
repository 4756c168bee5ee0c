"""The main menu listing every tool."""

from __future__ import annotations

from dataclasses import dataclass

from .theme import HIGHLIGHT_SYMBOL, Rect, Span, draw_paragraph, highlight_style

MENU_OPTIONS = (
    "Run SMART Test",
    "AMD GPU Test",
    "NVIDIA GPU Test",
    "Photo Exporter",
    "NVIDIA Driver Installer",
    "Keyboard Test",
    "Gamepad Test",
    "Audio Test",
    "Exit",
)


@dataclass
class MainMenu:
    """Selection state of the main menu."""

    index: int = 0

    def increment(self):
        if self.index < len(MENU_OPTIONS) - 1:
            self.index += 1

    def decrement(self):
        if self.index > 0:
            self.index -= 1

    def selected_option(self):
        return MENU_OPTIONS[self.index]

    def draw(self, win):
        height, width = win.getmaxyx()
        lines = []
        for i, option in enumerate(MENU_OPTIONS):
            if i == self.index:
                lines.append(Span(f"{HIGHLIGHT_SYMBOL}{option}", highlight_style()))
            else:
                lines.append(Span(f"  {option}"))
        draw_paragraph(win, Rect(0, 0, width, height), "Main Menu", lines)