[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "potioncalc"
version = "0.1.0"
description = "Search ingredient combinations that brew perfect potions in Potionomics"
requires-python = ">=3.10"
dependencies = []
keywords = ["potionomics", "potions", "calculator", "game", "search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
potioncalc = "potioncalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["potioncalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
