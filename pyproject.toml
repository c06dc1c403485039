[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casinojack"
version = "0.1.0"
description = "A blackjack game for the terminal, drawn with ANSI escape sequences"
requires-python = ">=3.10"
dependencies = []
keywords = ["blackjack", "cards", "casino", "terminal", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
casinojack = "casinojack.main:main"

[tool.hatch.build.targets.wheel]
packages = ["casinojack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
