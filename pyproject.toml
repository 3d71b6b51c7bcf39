[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "extrakit"
version = "1.0.0"
description = "Small containers, caches and 2D geometry helpers: LRU caches, flat maps, rectangle alignment, box and grid layouts, rounded polygons."
requires-python = ">=3.10"
dependencies = []
keywords = ["lru", "cache", "flatmap", "geometry", "layout", "rectangle", "polygon"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["extrakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
