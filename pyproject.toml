[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lamina"
version = "1.0.0"
description = "Runtime library for the Lamina language: exact irrationals, a small computer algebra system, structs, strings, math, I/O and sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["lamina", "computer algebra", "symbolic", "irrational", "runtime"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lamina"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
