[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterbot"
version = "0.1.0"
description = "In-memory bitmaps, BMP files, colour and image search, base64, a small PRNG, alerts and clipboard data"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitmap", "bmp", "image search", "colour search", "base64", "random", "alert"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rasterbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
