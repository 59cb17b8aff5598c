[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "velha"
version = "0.1.0"
description = "Judge a tic-tac-toe board: X wins, O wins, draw, still open or impossible."
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "jogo da velha", "board game", "game state"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
velha-selfcheck = "velha.selfcheck:main"

[tool.hatch.build.targets.wheel]
packages = ["velha"]

[tool.pytest.ini_options]
addopts = "-ra"
