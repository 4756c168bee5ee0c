# refurbtui

A full-screen curses menu for bench checks on computers that are being
recycled or refurbished. It runs the usual Linux tools (`lsblk`, `smartctl`,
`lsusb`, `gphoto2` and others) and shows their results in the terminal.

## Requirements

Linux and Python 3.10 or later. Each feature runs an external program, which
must be on `PATH` when you use it:

| Feature                  | Programs                                   |
|--------------------------|--------------------------------------------|
| SMART test               | `lsblk`, `smartctl`                        |
| Keyboard / Gamepad test  | `lsusb`                                    |
| Photo exporter           | `bash`, `gphoto2`                          |
| NVIDIA driver installer  | `bash`, `sudo`, `aura`, `mkinitcpio`       |
| GPU vendor detection     | `lspci`                                    |
| Stability run            | `bash`                                     |

Audio playback uses `pygame`, which is installed with the package.

## Installation

```
pip install .
```

## Usage

```
refurbtui
```

The command takes no options apart from `--help`.

### Keys

| Key        | Action                                                               |
|------------|----------------------------------------------------------------------|
| Up / Down  | Move the selection, or scroll the SMART attribute list               |
| Enter      | Open the selected menu entry, or act on the selected device/driver   |
| `q`        | Leave the current screen; on the main menu, quit                     |
| `s`        | Start the stress-test progress popup                                 |
| `t`        | Start a stability run in the background                              |

### Main menu entries

- **Run SMART Test**: lists whole disks from `lsblk -d -o NAME,SIZE,MODEL`.
  Enter runs `smartctl -a` on the chosen disk. The report screen shows six
  boxes (health, model family, device model, capacity, temperature and
  power-on hours) above the full attribute list, which scrolls with Up/Down.
  Health is "Great" for `PASSED`, "Good" for `OK` and "Bad" for any other
  result.
- **AMD GPU Test / NVIDIA GPU Test**: load the list of NVIDIA driver packages
  used by the driver installer. No screen opens by itself.
- **Photo Exporter**: in `/home/ecom/Pictures/ebay`, creates the folder after
  the highest existing `SWnnn` (starting at `SW084` when there is none), and
  runs `gphoto2 --get-all-files` inside it. A progress bar then fills and the
  script's output is shown.
- **NVIDIA Driver Installer**: choose `nvidia (stable)`, `nvidia-beta`,
  `nvidia-open` or `nvidia-390xx` and press Enter to run
  `sudo aura -A --noconfirm <driver>` followed by `sudo mkinitcpio -P`. The
  list is shown once one of the GPU Test entries has been chosen earlier in
  the session. The status screen stays up until `q`.
- **Keyboard Test / Gamepad Test**: list the `lsusb` lines that mention a
  keyboard, or a controller, gamepad or joystick. Enter shows which device
  was chosen.
- **Audio Test**: plays `assets/audio/test.wav` (relative to the working
  directory) if it exists, then fills a progress bar. The output list offers
  "Speakers" and "Headphones".
- **Exit**: quits.

## Using the parts from Python

The screens are plain dataclasses that can be driven without a terminal,
for example:

```python
from refurbtui.smart import parse_lsblk, summarize, format_capacity

summary = summarize(open("report.txt").read())
print(summary.health, summary.capacity)
print(format_capacity(500107862016))   # "465.76 GB"
```

`refurbtui.app.App` holds all screen state; `App.handle_key` takes a key
(a curses key code or a one-character string) and returns `False` when the
application should quit. `PhotoExporter`, `DriverInstaller` and `AudioTest`
accept a runner or player callable and a `step_delay`, and
`PhotoExporter` also takes `base_path` and `default_start`.

## What it does not do

- The stress test only shows a timed progress bar; it puts no load on the
  machine.
- The stability run is a ten-second `sleep` under `bash`; it prints start and
  finish lines to standard output and has no screen of its own.
- No menu entry opens the GPU test screen (`refurbtui.gpu_test.GpuTest`).
- Keyboard, gamepad and audio tests do not check individual keys, buttons or
  sound output; choosing an audio output does not change where the sound
  plays.
- The photo export folder and the installed driver packages are fixed and
  cannot be changed from the command line.

## Running the tests

```
pip install .[test]
pytest
```