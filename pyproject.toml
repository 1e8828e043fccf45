[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kipcb"
version = "0.1.0"
description = "Read KiCad PCB board files, check their layout and open a viewer window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["kicad", "pcb", "s-expression", "eda", "viewer"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kipcb = "kipcb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kipcb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
