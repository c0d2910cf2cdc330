[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Small teaching implementations of classic data structures and algorithms: expression notation conversion, bounded queues and stacks, hash tables and Prim's minimum spanning tree."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "queue",
    "stack",
    "hashing",
    "infix",
    "postfix",
    "prefix",
    "minimum-spanning-tree",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit = "dsakit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
