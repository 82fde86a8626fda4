[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "battlecity"
version = "0.1.0"
description = "A multiplayer grid shooter: game model, SQLite account storage and HTTP routes, plus a client-side board and shop model"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["game", "arcade", "battle-city", "multiplayer", "http", "sqlite"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["battlecity"]

[tool.pytest.ini_options]
addopts = "-ra"
