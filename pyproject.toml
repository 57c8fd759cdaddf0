[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent24"
version = "0.1.0"
description = "Solvers and simulations for a set of Advent of Code 2024 puzzles"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "simulation", "aoc2024"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
advent24-day01 = "advent24.day01:main"
advent24-day11 = "advent24.day11:main"
advent24-day11-storage = "advent24.day11_storage:main"
advent24-day12 = "advent24.day12:main"
advent24-day13 = "advent24.day13:main"
advent24-day14 = "advent24.day14:main"
advent24-day15 = "advent24.day15:main"
advent24-day17 = "advent24.day17:main"

[tool.hatch.build.targets.wheel]
packages = ["advent24"]

[tool.pytest.ini_options]
addopts = "-ra"
