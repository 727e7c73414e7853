[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "decimal96"
version = "0.1.0"
description = "A 96-bit fixed-point decimal type with scale and sign, supporting arithmetic, comparison, rounding and conversion."
requires-python = ">=3.10"
dependencies = []
keywords = ["decimal", "fixed-point", "arithmetic", "96-bit", "banker's rounding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
packages = ["decimal96"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
