[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doomdelve"
version = "0.1.0"
description = "Game rules for a classic terminal dungeon crawler: dice, rings, potions, the pack, options, key decoding and the scoreboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "game", "scoreboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["doomdelve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
