[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dome"
version = "0.1.0"
description = "Software pixel canvas, 8x8 bitmap font and file helpers for a minimalist game engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "canvas", "pixel", "bitmap-font", "rasterizer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dome"]

[tool.hatch.build.targets.sdist]
include = ["dome", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
