[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ultimatettt"
version = "0.1.0"
description = "Ultimate Tic-Tac-Toe for the terminal, for two players or against the computer"
requires-python = ">=3.10"
keywords = ["tic-tac-toe", "ultimate", "game", "terminal", "board game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ultimatettt = "ultimatettt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ultimatettt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
