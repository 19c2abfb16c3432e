[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labmath"
version = "0.1.0"
description = "Complex number arithmetic with a command-line calculator, and Conway's Game of Life on a toroidal grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["complex numbers", "calculator", "game of life", "cellular automaton"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
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

[project.scripts]
complex-number = "labmath.complex_calculator:main"

[tool.hatch.build.targets.wheel]
packages = ["labmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
