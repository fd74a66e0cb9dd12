[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "crematoria"
version = "1.2.0"
description = "Player framework, game-state model and sample players for Crematoria, a four-player turn-based strategy game on a two-level grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "strategy", "turn-based", "ai", "bots", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["crematoria"]

[tool.pytest.ini_options]
addopts = "-ra"
