[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polymath"
version = "0.1.0"
description = "Small numerical, vector and physics helpers, signal transforms, and typed records for a wide range of domains"
requires-python = ">=3.10"
dependencies = []
keywords = ["mathematics", "numerical", "vectors", "physics", "compression", "records", "dataclasses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polymath"]

[tool.pytest.ini_options]
addopts = "-ra"
