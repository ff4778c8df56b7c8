[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socialstructs"
version = "0.1.0"
description = "Linked lists, a stack, a sparse matrix and record types for a small social network"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked-list", "stack", "sparse-matrix", "graphviz", "data-structures"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["socialstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
