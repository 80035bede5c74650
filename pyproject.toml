[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chordlet"
version = "0.1.0"
description = "Building blocks for Discord bots: API object models, lenient JSON field readers and small string and formatting utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["discord", "bot", "chat", "json", "embed", "presence"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chordlet"]

[tool.hatch.build.targets.sdist]
include = ["chordlet", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
