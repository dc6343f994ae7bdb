[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bubblebobble"
version = "0.1.0"
description = "Game logic for a Bubble Bobble style arcade game: high scores, menus, level files and scene flow"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "bubble-bobble", "highscores", "levels"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bubblebobble"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
