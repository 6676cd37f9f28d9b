[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nothingkit"
version = "0.1.0"
description = "Geometry, rigid-body physics, text layout and UI widget state for a small 2D platformer"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "platformer", "geometry", "physics", "ui", "widgets"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nothingkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
