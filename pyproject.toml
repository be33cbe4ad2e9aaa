[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reduct"
version = "2.0.2"
description = "Building blocks of a functional, S-expression based scripting language: character table, number rules, interned atoms, bytecode functions, closures and disassembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["s-expression", "lisp", "bytecode", "interpreter", "atoms", "disassembler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reduct"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
