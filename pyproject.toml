[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kotawarga"
version = "0.1.0"
description = "Keep track of cities and their residents from an interactive terminal menu"
requires-python = ">=3.10"
keywords = ["linked-list", "cities", "residents", "menu", "cli"]
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
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kotawarga = "kotawarga.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kotawarga"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
