import curses

from refurbtui.app import App, main
from refurbtui.audio_test import AudioTest
from refurbtui.gamepad_test import GamepadTest
from refurbtui.keyboard_test import KeyboardTest
from refurbtui.menu import MENU_OPTIONS, MainMenu
from refurbtui.menu_gpu import DriverMenu
from refurbtui.menu_input import InputTests
from refurbtui.nvidia_drivers import DriverInstaller, driver_list
from refurbtui.photo_exporter import PhotoExporter
from refurbtui.stress_test import StressTest

import pytest


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


def make_app():
    calls = []
    app = App(
        inputs=InputTests(
            keyboard=KeyboardTest(fetch=lambda: ["kbd A", "kbd B"]),
            gamepad=GamepadTest(fetch=lambda: ["pad A"]),
            audio=AudioTest(player=lambda path: True, step_delay=0),
        ),
        drivers=DriverMenu(installer=DriverInstaller(runner=lambda s: "ok", step_delay=0)),
        exporter=PhotoExporter(runner=lambda s: "done", step_delay=0),
        stress=StressTest(step_delay=0),
        start_stability=lambda: calls.append("stability"),
    )
    return app, calls


def select(app, option):
    app.menu = MainMenu(index=MENU_OPTIONS.index(option))


def test_q_on_main_menu_quits():
    app, _ = make_app()
    assert app.handle_key("q") is False


def test_down_and_up_move_menu():
    app, _ = make_app()
    assert app.handle_key(curses.KEY_DOWN) is True
    assert app.menu.index == 1
    app.handle_key(curses.KEY_UP)
    assert app.menu.index == 0


def test_exit_option_quits():
    app, _ = make_app()
    select(app, "Exit")
    assert app.handle_key(10) is False


def test_keyboard_test_flow():
    app, _ = make_app()
    select(app, "Keyboard Test")
    app.handle_key(curses.KEY_ENTER)
    assert app.inputs.keyboard.active is True
    app.handle_key(curses.KEY_DOWN)
    assert app.inputs.keyboard.selected == 1
    assert app.menu.index == MENU_OPTIONS.index("Keyboard Test")
    app.handle_key(13)
    assert app.inputs.keyboard.message == "Starting test on: kbd B\n(Feature under development)"
    assert app.handle_key("q") is True
    assert app.inputs.active() is False


def test_gpu_options_fill_driver_list_only():
    app, _ = make_app()
    select(app, "AMD GPU Test")
    app.handle_enter()
    assert app.drivers.drivers == driver_list()
    assert app.drivers.installer.selection_active is False


def test_driver_installer_selection_and_cancel():
    app, _ = make_app()
    select(app, "NVIDIA Driver Installer")
    app.handle_key(10)
    assert app.drivers.installer.selection_active is True
    app.handle_key(curses.KEY_DOWN)
    assert app.drivers.installer.selected == 1
    app.handle_key("q")
    assert app.drivers.installer.selection_active is False
    assert app.drivers.installer.message == ""


def test_photo_exporter_option_and_exit():
    app, _ = make_app()
    select(app, "Photo Exporter")
    app.handle_key(10)
    assert app.exporter.active is True
    app.handle_key("q")
    assert app.exporter.active is False


def test_stress_key_starts_and_q_stops():
    app, _ = make_app()
    app.handle_key("s")
    assert app.stress.active is True
    assert app.handle_key("q") is True
    assert app.stress.active is False


def test_t_starts_stability():
    app, calls = make_app()
    app.handle_key("t")
    assert calls == ["stability"]


def test_smart_output_scroll_and_exit():
    app, _ = make_app()
    app.smart.active = True
    app.handle_key(curses.KEY_DOWN)
    app.handle_key(curses.KEY_DOWN)
    app.handle_key(curses.KEY_UP)
    assert app.smart.scroll == 1
    app.handle_key("q")
    assert app.smart.active is False


def test_disk_selection_navigation():
    app, _ = make_app()
    app.smart.disks = ["/dev/sda - 1T - A", "/dev/sdb - 2T - B"]
    app.smart.disk_selection_active = True
    app.handle_key(curses.KEY_DOWN)
    assert app.smart.selected == 1
    app.handle_key("q")
    assert app.smart.disk_selection_active is False


def test_draw_main_menu_by_default():
    app, _ = make_app()
    win = FakeWindow()
    app.draw(win)
    assert "Main Menu" in win.text()


def test_draw_stress_when_active():
    app, _ = make_app()
    app.stress.active = True
    win = FakeWindow()
    app.draw(win)
    assert "Stress Test Progress" in win.text()
    assert "Main Menu" not in win.text()


def test_draw_disk_selection_first():
    app, _ = make_app()
    app.smart.disk_selection_active = True
    app.stress.active = True
    win = FakeWindow()
    app.draw(win)
    assert "Select Drive for SMART Test" in win.text()


def test_main_help_exits():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0