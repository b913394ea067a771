[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rhea"
version = "0.1.0"
description = "Small numeric toolkit: vectors, 4x4 matrices, quaternions, ranges, intervals and series approximations"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "quaternion", "rotation", "interval", "range", "linear algebra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rhea"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
