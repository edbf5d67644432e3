[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketapps"
version = "0.1.0"
description = "A small in-memory taxi ride HTTP API and a terminal Wordle game"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["taxi", "rides", "rest", "http", "wordle", "game", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taxi-api = "pocketapps.taxi.server:main"
wordle = "pocketapps.wordle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketapps"]

[tool.hatch.build.targets.sdist]
include = [
    "pocketapps",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
