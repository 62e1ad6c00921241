[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wastelandtales"
version = "0.1.0"
description = "Branching story graphs for a zombie-apocalypse survival adventure"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "interactive fiction", "survival", "zombies", "branching story"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
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
packages = ["wastelandtales"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
