[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "riichikit"
version = "0.1.0"
description = "Riichi mahjong scoring helpers and Tenhou JSON log result interop"
requires-python = ">=3.10"
dependencies = []
keywords = ["mahjong", "riichi", "tenhou", "scoring", "game-log"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["riichikit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
