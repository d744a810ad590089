[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scopetab"
version = "0.1.0"
description = "Scoped symbol tables with chained hash buckets, a command-driven collision report, and an N-puzzle solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["symbol table", "compiler", "scope", "hashing", "sdbm", "bkdr", "n-puzzle", "a-star"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scopetab-report = "scopetab.report:main"
scopetab-npuzzle = "scopetab.npuzzle:main"

[tool.hatch.build.targets.wheel]
packages = ["scopetab"]

[tool.pytest.ini_options]
addopts = "-ra"
