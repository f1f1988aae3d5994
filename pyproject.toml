[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pcmatrix"
version = "0.1.0"
description = "Producer-consumer bounded buffer demo that generates and multiplies random matrices across threads"
requires-python = ">=3.10"
dependencies = []
keywords = ["producer-consumer", "bounded-buffer", "threads", "condition-variables", "matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pcmatrix = "pcmatrix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pcmatrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
