"""Graphics card vendor detection and the currently selected card."""

from __future__ import annotations

import subprocess
import threading
from enum import Enum


class GpuType(Enum):
    AMD = "AMD"
    NVIDIA = "Nvidia"
    UNKNOWN = "Unknown"

    def __str__(self):
        return self.value


class _GpuState:
    def __init__(self):
        self.lock = threading.Lock()
        self.selected_gpu = ""
        self.gpu_type = GpuType.UNKNOWN


_state = _GpuState()


def classify_lspci(output):
    """Classify ``lspci`` output by the vendor names it mentions."""
    lower = output.lower()
    if "amd" in lower or "ati" in lower:
        return GpuType.AMD
    if "nvidia" in lower:
        return GpuType.NVIDIA
    return GpuType.UNKNOWN


def detect_gpu_type():
    """Run ``lspci -nn`` and classify the result."""
    try:
        result = subprocess.run(["lspci", "-nn"], capture_output=True)
        output = result.stdout.decode("utf-8", errors="replace")
    except OSError:
        output = "unknown"
    gpu_type = classify_lspci(output)
    with _state.lock:
        _state.gpu_type = gpu_type
    return gpu_type


def set_selected_gpu(name):
    with _state.lock:
        _state.selected_gpu = name


def get_selected_gpu():
    with _state.lock:
        return _state.selected_gpu