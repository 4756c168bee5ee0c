"""Drive listing, SMART reports and their summary screen."""

from __future__ import annotations

import curses
import subprocess
from dataclasses import dataclass, field

from .theme import Rect, Span, Style, draw_paragraph, split_horizontal, split_vertical

_KB = 1 << 10
_MB = 1 << 20
_GB = 1 << 30
_TB = 1 << 40

_HEALTH_RESULTS = {"PASSED": "Great", "OK": "Good"}
_HEALTH_COLORS = {
    "Great": curses.COLOR_GREEN,
    "Good": curses.COLOR_YELLOW,
    "Bad": curses.COLOR_RED,
}


def parse_lsblk(output):
    """Turn ``lsblk -d -o NAME,SIZE,MODEL`` output into drive labels."""
    drives = []
    for line in output.splitlines()[1:]:
        parts = line.split()
        if len(parts) >= 3:
            drives.append(f"/dev/{parts[0]} - {parts[1]} - {parts[2]}")
    return drives


def format_capacity(size):
    """Render a byte count in TB, GB or MB with two decimals."""
    if size >= _TB:
        return f"{size / _TB:.2f} TB"
    if size >= _GB:
        return f"{size / _GB:.2f} GB"
    if size >= _MB:
        return f"{size / _MB:.2f} MB"
    return f"{size} bytes"


@dataclass
class SmartSummary:
    health: str = "Unknown"
    family: str = "Unknown"
    model: str = "Unknown"
    capacity: str = "Unknown"
    temperature: str = "N/A"
    hours: str = "Unknown"


def _field_after_colon(line):
    parts = line.split(":")
    return parts[1].strip() if len(parts) > 1 else ""


def _parse_capacity(line):
    start = line.find("[")
    end = line.find("]")
    if start == -1 or end == -1:
        return None
    digits = line[start + 1 : end].replace(",", "").replace(" bytes", "").strip()
    if not (digits.isascii() and digits.isdigit()):
        return None
    size = int(digits)
    return size if size < 1 << 64 else None


def summarize(output):
    """Pick the headline values out of ``smartctl -a`` output."""
    summary = SmartSummary()
    for line in output.splitlines():
        if "Device Model:" in line:
            summary.model = _field_after_colon(line)
        if "Model Family:" in line:
            summary.family = _field_after_colon(line)
        if "User Capacity:" in line:
            size = _parse_capacity(line)
            if size is not None:
                summary.capacity = format_capacity(size)
        if "Temperature_Celsius" in line:
            summary.temperature = line.split()[-1]
        if "Power_On_Hours" in line:
            summary.hours = line.split()[-1]
        if "SMART overall-health self-assessment test result:" in line:
            summary.health = _HEALTH_RESULTS.get(_field_after_colon(line), "Bad")
    return summary


def _centered(spans, width):
    length = sum(len(s.text) for s in spans)
    pad = max(0, (width - length) // 2)
    return [Span(" " * pad), *spans] if pad else list(spans)


def _attribute_lines(output):
    key_style = Style(fg=curses.COLOR_CYAN, bold=True)
    value_style = Style(fg=curses.COLOR_WHITE)
    lines = []
    for line in output.splitlines():
        if ":" in line:
            key, value = line.split(":", 1)
            lines.append([Span(f"{key.strip()}: ", key_style), Span(value.strip(), value_style)])
        else:
            lines.append([Span(f" {line}")])
    return lines


def _draw_scrollbar(win, rect, position, content_length):
    column = rect.x + rect.width - 1
    track = rect.height - 2
    if track <= 0 or rect.width <= 0:
        return
    thumb = min(track - 1, min(position, content_length) * track // content_length)
    for row in range(track):
        symbol = "█" if row == thumb else "|"
        try:
            win.addstr(rect.y + 1 + row, column, symbol, curses.A_NORMAL)
        except curses.error:
            pass


@dataclass
class SmartState:
    """Drive selection and SMART report state."""

    output: str = ""
    active: bool = False
    disk_selection_active: bool = False
    disks: list[str] = field(default_factory=list)
    selected: int = 0
    scroll: int = 0

    def enter_disk_selection(self):
        """List whole disks with ``lsblk`` and open the drive chooser."""
        result = subprocess.run(
            ["lsblk", "-d", "-o", "NAME,SIZE,MODEL"], capture_output=True
        )
        self.disks = parse_lsblk(result.stdout.decode("utf-8", errors="replace"))
        self.selected = 0
        self.disk_selection_active = True

    def exit_disk_selection(self):
        self.disk_selection_active = False

    def next_drive(self):
        if self.selected < max(0, len(self.disks) - 1):
            self.selected += 1

    def previous_drive(self):
        if self.selected > 0:
            self.selected -= 1

    def run_on_selected(self):
        """Run ``smartctl -a`` on the chosen drive and show the report."""
        if 0 <= self.selected < len(self.disks):
            label = self.disks[self.selected]
        else:
            label = "/dev/sda"
        device = label.split(" - ")[0]
        try:
            result = subprocess.run(["smartctl", "-a", device], capture_output=True)
        except OSError as exc:
            self.output = f"Failed to run smartctl: {exc}"
        else:
            self.output = result.stdout.decode("utf-8", errors="replace")
            self.scroll = 0
        self.active = True
        self.disk_selection_active = False

    def scroll_up(self):
        if self.scroll > 0:
            self.scroll -= 1

    def scroll_down(self):
        self.scroll += 1

    def exit_output(self):
        self.active = False

    def draw_output(self, win):
        height, width = win.getmaxyx()
        area = Rect(0, 0, width, height).inner(1)
        top, bottom = split_vertical(area, [area.height * 60 // 100, None])
        upper, lower = split_vertical(top, [top.height // 2, None])
        cells = split_horizontal(upper, 3) + split_horizontal(lower, 3)

        summary = summarize(self.output)
        white = curses.COLOR_WHITE
        boxes = [
            ("Health Status", summary.health, _HEALTH_COLORS.get(summary.health, white), "🩺"),
            ("Model Family", summary.family, white, "🏠"),
            ("Device Model", summary.model, white, "💾"),
            ("Capacity", summary.capacity, white, "💽"),
            ("Temperature (°C)", summary.temperature, white, "🌡"),
            ("Runtime Hours", summary.hours, white, "⏱"),
        ]
        for (label, value, color, icon), rect in zip(boxes, cells):
            inner_width = max(0, rect.width - 2)
            lines = [
                _centered([Span(icon, Style(fg=color, bold=True))], inner_width),
                _centered([Span(f"{label}: {value}", Style(fg=color))], inner_width),
            ]
            draw_paragraph(win, rect, label, lines)

        lines = _attribute_lines(self.output)
        draw_paragraph(win, bottom, "SMART Attributes", lines[self.scroll :])
        _draw_scrollbar(win, bottom, self.scroll, max(len(lines) - 1, 1))