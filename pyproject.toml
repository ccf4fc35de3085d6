[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casinotable"
version = "0.1.0"
description = "Four-seat card-table game logic: card movement, volume options, multiplayer lobby and Texas hold'em betting, showdown and side pots"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas-holdem", "cards", "casino", "game-logic"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["casinotable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
