[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minicomp"
version = "0.1.0"
description = "Core building blocks of a small teaching-language compiler: symbols, scopes, typed values and interned strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "symbol-table", "scope", "interning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["minicomp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
