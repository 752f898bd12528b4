[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbasics"
version = "0.1.0"
description = "Small teaching data structures and introductory programming exercises."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "data structures", "array", "linked list", "exercises"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsbasics"]

[tool.hatch.build.targets.sdist]
include = ["dsbasics", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
