[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent24"
version = "0.1.0"
description = "Solvers for days 1 to 15 of a season of daily programming puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solutions"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent24-day01 = "advent24.day01:main"
advent24-day02 = "advent24.day02:main"
advent24-day03 = "advent24.day03:main"
advent24-day04 = "advent24.day04:main"
advent24-day05 = "advent24.day05:main"
advent24-day06 = "advent24.day06:main"
advent24-day07 = "advent24.day07:main"
advent24-day08 = "advent24.day08:main"
advent24-day09 = "advent24.day09:main"
advent24-day10 = "advent24.day10:main"
advent24-day11 = "advent24.day11:main"
advent24-day12 = "advent24.day12:main"
advent24-day13 = "advent24.day13:main"
advent24-day14 = "advent24.day14:main"
advent24-day15 = "advent24.day15:main"

[tool.hatch.build.targets.wheel]
packages = ["advent24"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
