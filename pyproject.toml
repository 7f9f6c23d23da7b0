[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2024"
version = "0.1.0"
description = "Solutions to the 2024 Advent of Code puzzles, days 1 to 19"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2024 = "advent2024.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2024"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
