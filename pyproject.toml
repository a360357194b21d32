[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elixirtiles"
version = "0.1.0"
description = "A small tile-based elixir game built on pygame."
requires-python = ">=3.10"
keywords = ["game", "tiles", "pygame", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
elixirtiles = "elixirtiles.app:main"

[tool.hatch.build.targets.wheel]
packages = ["elixirtiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
