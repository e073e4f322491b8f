[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transabs"
version = "0.1.0"
description = "Transient absorption spectroscopy: frame processing, delay scheduling and stage control"
requires-python = ">=3.10"
keywords = ["transient absorption", "spectroscopy", "pump-probe", "delay stage", "monochromator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["transabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
