[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pc-keyboard"
version = "0.8.0"
description = "Decode PS/2 keyboard bit-streams and scancodes into key events and characters."
requires-python = ">=3.10"
dependencies = []
keywords = ["keyboard", "ps2", "scancode", "layout", "i8042"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pc_keyboard"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
