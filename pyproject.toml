[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "oadcs"
version = "0.1.0"
description = "Orbit and attitude dynamics toolkit: attitude representations, Runge-Kutta integrators and gravity models"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["orbit", "attitude", "quaternion", "runge-kutta", "gravity", "astrodynamics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oadcs = "oadcs.main:main"

[tool.setuptools.packages.find]
include = ["oadcs*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
