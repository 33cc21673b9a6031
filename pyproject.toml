[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linregkit"
version = "0.1.0"
description = "Small dense linear algebra toolkit with linear system solvers, Tikhonov regularization and a CPU performance regression pipeline"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "matrix",
    "gaussian elimination",
    "conjugate gradient",
    "tikhonov",
    "ridge regression",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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

[project.scripts]
linregkit-demo = "linregkit.demo:main"
linregkit-cpu = "linregkit.regression:main"

[tool.hatch.build.targets.wheel]
packages = ["linregkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
