"""Camera photo export into the next numbered folder, with progress."""

from __future__ import annotations

import curses
import subprocess
import threading
import time
from dataclasses import dataclass
from typing import Callable

from .theme import Rect, draw_gauge, draw_paragraph, split_vertical

DEFAULT_BASE_PATH = "/home/ecom/Pictures/ebay"
DEFAULT_START = 84


def export_script(base_path, default_start):
    """Shell script that creates the next ``SWnnn`` folder and downloads the camera's files into it."""
    return f"""
cd "{base_path}" || exit 1
last_num=$(ls -d SW* 2>/dev/null | grep -E '^SW[0-9]{{3}}$' | sed 's/SW//' | sort -n | tail -n 1)
if [[ -z "$last_num" ]]; then
  next_num={default_start}
else
  next_num=$((10#$last_num + 1))
fi
if (( next_num >= 100 )); then
  new_folder="SW$next_num"
else
  new_folder=$(printf "SW%03d" "$next_num")
fi
mkdir "$new_folder" && cd "$new_folder" || exit 1
gphoto2 --get-all-files
cd ..
"""


def gauge_color(progress):
    """Progress bar colour: red below 50, yellow below 80, green from there."""
    if progress < 50:
        return curses.COLOR_RED
    if progress < 80:
        return curses.COLOR_YELLOW
    return curses.COLOR_GREEN


def _run_bash(script):
    result = subprocess.run(["bash", "-c", script], capture_output=True)
    return result.stdout.decode("utf-8", errors="replace")


@dataclass
class PhotoExporter:
    """Photo export state; ``step_delay`` is seconds per percent of progress."""

    runner: Callable[[str], str] = _run_bash
    base_path: str = DEFAULT_BASE_PATH
    default_start: int = DEFAULT_START
    step_delay: float = 0.02
    active: bool = False
    progress: int = 0
    message: str = ""

    def run(self):
        """Start the export in a background thread and return the thread."""
        self.active = True
        self.progress = 0
        self.message = "Preparing to export photos..."
        worker = threading.Thread(target=self._export, daemon=True)
        worker.start()
        return worker

    def _export(self):
        try:
            stdout = self.runner(export_script(self.base_path, self.default_start))
            error = None
        except OSError as exc:
            stdout = ""
            error = exc

        for percent in range(101):
            self.progress = percent
            time.sleep(self.step_delay)

        if error is None:
            self.message = f"Photo export complete:\n{stdout}"
        else:
            self.message = f"Photo export failed: {error}"

    def exit(self):
        self.active = False
        self.progress = 0
        self.message = ""

    def draw(self, win):
        height, width = win.getmaxyx()
        gauge_area, text_area = split_vertical(Rect(0, 0, width, height).inner(2), [3, None])
        draw_gauge(win, gauge_area, "Export Progress", self.progress, gauge_color(self.progress))
        draw_paragraph(win, text_area, "Status", self.message.splitlines())