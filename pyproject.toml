[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sptile"
version = "2.0.0"
description = "Dense tiling and tile traversal for sparse tensors in coordinate form, with small timing and utility helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse tensor", "tiling", "tensor decomposition", "coordinate format", "cache blocking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sptile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
