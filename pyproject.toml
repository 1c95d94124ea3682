[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchcore"
version = "0.1.0"
description = "Microcontroller sketch-style utilities: number formatting, a mutable string type, printing sinks, character streams, a ring buffer and IPv4 addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "microcontroller", "sketch", "formatting", "stream", "ring-buffer", "string"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sketchcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
