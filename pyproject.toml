[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recursia"
version = "1.0.0"
description = "Recursive generators for mountain ranges, temples and words, plus a small test runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["recursion", "fractal", "midpoint-displacement", "teaching", "testing"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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

[tool.hatch.build.targets.wheel]
packages = ["recursia"]

[tool.pytest.ini_options]
addopts = "-ra"
