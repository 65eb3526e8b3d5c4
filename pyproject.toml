[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfgparse"
version = "0.1.0"
description = "Backtracking recursive-descent parsers for arithmetic, comparison, logical and SQL SELECT grammars"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "grammar", "recursive-descent", "backtracking", "cfg", "sql"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfgparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
