[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordladder"
version = "0.1.0"
description = "Word ladder puzzle: find, play and score chains of words that differ by one letter"
requires-python = ">=3.10"
dependencies = []
keywords = ["word ladder", "puzzle", "game", "graph", "breadth-first search"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordladder = "wordladder.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wordladder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
