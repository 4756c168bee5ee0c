"""Screen layout and drawing helpers shared by every view."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence, Union

HIGHLIGHT_SYMBOL = "▶ "


class Style(NamedTuple):
    """Foreground and background colour (curses colour numbers) plus boldness."""

    fg: Optional[int] = None
    bg: Optional[int] = None
    bold: bool = False


class Span(NamedTuple):
    """A piece of text drawn in one style."""

    text: str
    style: Style = Style()


Line = Union[str, Span, Sequence[Span]]
Text = Union[str, Sequence[Line]]

_TITLE_STYLE = Style(fg=curses.COLOR_CYAN, bold=True)
_LIST_HIGHLIGHT = Style(fg=curses.COLOR_BLACK, bg=curses.COLOR_WHITE)
_color_pairs: dict[tuple[Optional[int], Optional[int]], int] = {}


@dataclass(frozen=True)
class Rect:
    """A rectangular screen area in character cells."""

    x: int
    y: int
    width: int
    height: int

    def inner(self, margin):
        """Return the area left after removing ``margin`` cells on every side."""
        if margin < 0:
            raise ValueError("margin must not be negative")
        return Rect(
            self.x + margin,
            self.y + margin,
            max(0, self.width - 2 * margin),
            max(0, self.height - 2 * margin),
        )


def split_vertical(rect, heights):
    """Stack areas top to bottom; ``None`` entries share the space left over."""
    heights = list(heights)
    if any(h is not None and h < 0 for h in heights):
        raise ValueError("heights must not be negative")
    flexible = [i for i, h in enumerate(heights) if h is None]
    spare = max(0, rect.height - sum(h for h in heights if h is not None))

    sizes = []
    for i, h in enumerate(heights):
        if h is not None:
            sizes.append(h)
            continue
        share = spare // len(flexible)
        if i == flexible[-1]:
            share = spare - share * (len(flexible) - 1)
        sizes.append(share)

    areas = []
    y = rect.y
    bottom = rect.y + rect.height
    for size in sizes:
        size = max(0, min(size, bottom - y))
        areas.append(Rect(rect.x, y, rect.width, size))
        y += size
    return areas


def split_horizontal(rect, parts):
    """Divide an area into ``parts`` side-by-side columns of near-equal width."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    areas = []
    for i in range(parts):
        left = i * rect.width // parts
        right = (i + 1) * rect.width // parts
        areas.append(Rect(rect.x + left, rect.y, right - left, rect.height))
    return areas


def highlight_style():
    """Style for a selected entry: black on white, bold."""
    return Style(fg=curses.COLOR_BLACK, bg=curses.COLOR_WHITE, bold=True)


def info_box(title, content):
    """A line of the form ``title: content`` with a bold magenta title."""
    return [
        Span(title, Style(fg=curses.COLOR_MAGENTA, bold=True)),
        Span(": "),
        Span(content),
    ]


def _attr(style):
    attr = curses.A_BOLD if style.bold else curses.A_NORMAL
    if style.fg is None and style.bg is None:
        return attr
    key = (style.fg, style.bg)
    try:
        if not curses.has_colors():
            return attr
        pair = _color_pairs.get(key)
        if pair is None:
            pair = len(_color_pairs) + 1
            if pair >= getattr(curses, "COLOR_PAIRS", 0):
                return attr
            curses.init_pair(
                pair,
                -1 if style.fg is None else style.fg,
                -1 if style.bg is None else style.bg,
            )
            _color_pairs[key] = pair
        return attr | curses.color_pair(pair)
    except curses.error:
        return attr


def _put(win, y, x, text, attr, limit):
    text = text[: max(0, limit)]
    if not text:
        return
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell or past the edge is harmless here.
        pass


def _as_lines(text):
    if isinstance(text, str):
        return [[Span(part)] for part in text.split("\n")]
    lines = []
    for line in text:
        if isinstance(line, str):
            lines.append([Span(line)])
        elif isinstance(line, Span):
            lines.append([line])
        else:
            lines.append(list(line))
    return lines


def draw_block(win, rect, title):
    """Draw a bordered box with a title and return the area inside the border."""
    inner = rect.inner(1)
    if rect.width < 2 or rect.height < 2:
        return inner
    plain = curses.A_NORMAL
    right = rect.x + rect.width - 1
    _put(win, rect.y, rect.x, "┌" + "─" * (rect.width - 2) + "┐", plain, rect.width)
    for y in range(rect.y + 1, rect.y + rect.height - 1):
        _put(win, y, rect.x, "│", plain, 1)
        _put(win, y, right, "│", plain, 1)
    _put(
        win,
        rect.y + rect.height - 1,
        rect.x,
        "└" + "─" * (rect.width - 2) + "┘",
        plain,
        rect.width,
    )
    _put(win, rect.y, rect.x + 1, title, _attr(_TITLE_STYLE), rect.width - 2)
    return inner


def draw_list(win, rect, title, items, selected):
    """Draw a titled list, keeping the selected entry visible and highlighted."""
    inner = draw_block(win, rect, title)
    if inner.height <= 0:
        return
    items = list(items)
    offset = max(0, selected - inner.height + 1)
    visible = items[offset : offset + inner.height]
    for row, (index, item) in enumerate(enumerate(visible, start=offset)):
        if index == selected:
            text = f"{HIGHLIGHT_SYMBOL}{item}".ljust(inner.width)
            attr = _attr(_LIST_HIGHLIGHT)
        else:
            text = f"  {item}"
            attr = curses.A_NORMAL
        _put(win, inner.y + row, inner.x, text, attr, inner.width)


def draw_gauge(win, rect, title, percent, color):
    """Draw a titled progress bar filled to ``percent`` in the given colour."""
    if not 0 <= percent <= 100:
        raise ValueError("percent must be between 0 and 100")
    inner = draw_block(win, rect, title)
    filled = inner.width * percent // 100
    label = f"{percent}%"
    filled_attr = _attr(Style(fg=curses.COLOR_BLACK, bg=color))
    empty_attr = _attr(Style(fg=color, bg=curses.COLOR_BLACK))
    for row in range(inner.height):
        if row == inner.height // 2:
            line = label.center(inner.width)
        else:
            line = " " * inner.width
        y = inner.y + row
        _put(win, y, inner.x, line[:filled], filled_attr, filled)
        _put(win, y, inner.x + filled, line[filled:], empty_attr, inner.width - filled)


def draw_paragraph(win, rect, title, text):
    """Draw titled text; lines longer than the box are clipped."""
    inner = draw_block(win, rect, title)
    for row, line in enumerate(_as_lines(text)[: inner.height]):
        x = inner.x
        remaining = inner.width
        for span in line:
            if remaining <= 0:
                break
            _put(win, inner.y + row, x, span.text, _attr(span.style), remaining)
            x += len(span.text)
            remaining -= len(span.text)