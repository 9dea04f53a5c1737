[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "symdyn"
version = "1.0.0"
description = "Symbolic dynamics: shifts of finite type, sofic shifts, block codes, cylinder sets and Markov measures"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "symbolic dynamics",
    "shift of finite type",
    "sofic shift",
    "entropy",
    "block code",
    "cylinder set",
    "markov measure",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
test = [
    "pytest",
]

[project.scripts]
symdyn-examples = "symdyn.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["symdyn"]

[tool.pytest.ini_options]
addopts = "-ra"
