"""Drive chooser shown before a SMART report."""

from __future__ import annotations

from .theme import Rect, draw_list, draw_paragraph, split_vertical

INSTRUCTIONS = "Use ↑/↓ to navigate, Enter to begin test, q to cancel"


def draw_disk_selection(win, state):
    """Draw the drive list held by a ``SmartState`` together with key help."""
    height, width = win.getmaxyx()
    list_area, info_area = split_vertical(Rect(0, 0, width, height).inner(2), [3, None])
    draw_list(win, list_area, "Select Drive for SMART Test", state.disks, state.selected)
    draw_paragraph(win, info_area, "Instructions", INSTRUCTIONS)