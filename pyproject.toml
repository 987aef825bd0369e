[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algocount"
version = "0.1.0"
description = "Classic algorithms instrumented with basic-operation counters, plus best, average and worst case growth data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "complexity",
    "operation count",
    "sorting",
    "searching",
    "graphs",
    "dynamic programming",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algocount = "algocount.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algocount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
