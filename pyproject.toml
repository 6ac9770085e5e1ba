[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ph2utils"
version = "0.1.0"
description = "Support utilities for acquisition tooling: command-line parsing, JSON values, timing and console helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["command-line", "argument-parser", "json", "timer", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ph2utils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
