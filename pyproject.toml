[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "concmap"
version = "0.1.0"
description = "A thread-safe hash map with per-bin locking and lock-free reads"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash map", "concurrent", "thread-safe", "dictionary", "fnv"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["concmap*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
