[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lbptools"
version = "0.1.0"
description = "PGM image reading, Local Binary Pattern descriptors, median filtering and small classic data structures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pgm",
    "lbp",
    "local binary pattern",
    "image",
    "histogram",
    "median filter",
    "data structures",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lbptools = "lbptools.cli:main"
lbptools-menu = "lbptools.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["lbptools"]

[tool.pytest.ini_options]
addopts = "-ra"
