[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokerbot"
version = "0.1.0"
description = "A simple rule-based Texas hold'em client that plays against a game server over TCP"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas-holdem", "bot", "game-client"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
pokerbot = "pokerbot.client:main"

[tool.hatch.build.targets.wheel]
packages = ["pokerbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
