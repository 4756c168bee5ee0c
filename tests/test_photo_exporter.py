import curses

from refurbtui.photo_exporter import (
    DEFAULT_BASE_PATH,
    DEFAULT_START,
    PhotoExporter,
    export_script,
    gauge_color,
)


class FakeWindow:
    def __init__(self, height=24, width=80):
        self.height = height
        self.width = width
        self.writes = []

    def getmaxyx(self):
        return (self.height, self.width)

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text))

    def text(self):
        return "\n".join(t for _, _, t in self.writes)


def test_export_script_uses_path_and_start():
    script = export_script("/tmp/photos", 84)
    assert 'cd "/tmp/photos" || exit 1' in script
    assert "next_num=84" in script
    assert "grep -E '^SW[0-9]{3}$'" in script
    assert "gphoto2 --get-all-files" in script


def test_defaults_match_source():
    exporter = PhotoExporter()
    assert exporter.base_path == DEFAULT_BASE_PATH == "/home/ecom/Pictures/ebay"
    assert exporter.default_start == DEFAULT_START == 84


def test_gauge_color_thresholds():
    assert gauge_color(0) == curses.COLOR_RED
    assert gauge_color(49) == curses.COLOR_RED
    assert gauge_color(50) == curses.COLOR_YELLOW
    assert gauge_color(79) == curses.COLOR_YELLOW
    assert gauge_color(80) == curses.COLOR_GREEN
    assert gauge_color(100) == curses.COLOR_GREEN


def test_run_sets_preparing_state():
    started = []

    def runner(script):
        started.append(script)
        return ""

    exporter = PhotoExporter(runner=runner, step_delay=0)
    exporter.run().join()
    assert exporter.active is True
    assert started == [export_script(exporter.base_path, exporter.default_start)]


def test_run_success_reports_output():
    exporter = PhotoExporter(runner=lambda script: "downloaded", step_delay=0)
    exporter.run().join()
    assert exporter.progress == 100
    assert exporter.message == "Photo export complete:\ndownloaded"


def test_run_failure_reports_error():
    def runner(script):
        raise OSError("no bash")

    exporter = PhotoExporter(runner=runner, step_delay=0)
    exporter.run().join()
    assert exporter.message.startswith("Photo export failed: ")
    assert "no bash" in exporter.message
    assert exporter.progress == 100


def test_exit_resets_state():
    exporter = PhotoExporter(runner=lambda script: "x", step_delay=0)
    exporter.run().join()
    exporter.exit()
    assert (exporter.active, exporter.progress, exporter.message) == (False, 0, "")


def test_draw_shows_titles_and_message_lines():
    exporter = PhotoExporter(message="first\nsecond", progress=40)
    win = FakeWindow()
    exporter.draw(win)
    text = win.text()
    assert "Export Progress" in text
    assert "Status" in text
    assert "first" in text
    assert "second" in text
    assert "40%" in text