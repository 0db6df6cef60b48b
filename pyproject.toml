[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jigsawgrid"
version = "0.1.0"
description = "Grid-based jigsaw puzzle game logic: snapping, swapping, move counting and win detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["jigsaw", "puzzle", "grid", "game"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jigsawgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
