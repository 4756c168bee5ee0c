[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "refurbtui"
version = "0.1.0"
description = "A curses menu of hardware checks for recycling and refurbishing computers"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["tui", "curses", "smart", "smartctl", "hardware", "refurbishing", "gpu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
refurbtui = "refurbtui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["refurbtui"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
