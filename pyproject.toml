[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inputactions"
version = "0.1.0"
description = "Input-method-agnostic game actions: button states, axes, dead zones and per-action timing."
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "input", "actions", "gamepad", "mouse", "dead zone"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["inputactions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
