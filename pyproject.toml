[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ridemissions"
version = "0.1.0"
description = "Command interpreter for ride-sharing driver missions: distance, count and time targets with rewards."
requires-python = ">=3.10"
dependencies = []
keywords = ["ride-sharing", "missions", "drivers", "rewards", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ridemissions = "ridemissions.snap:main"

[tool.hatch.build.targets.wheel]
packages = ["ridemissions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
