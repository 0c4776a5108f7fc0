[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiringcore"
version = "1.0.0"
description = "Microcontroller core API helpers: bit math, number formatting, ring buffers, strings, printing, IP addresses and stream parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "microcontroller", "stream", "ring-buffer", "ip-address", "formatting"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wiringcore"]

[tool.pytest.ini_options]
addopts = "-ra"
