[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cdfengine"
version = "0.1.0"
description = "Game engine core: content definition format parsing, containers, 3D math, collision and state machines"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "cdf", "vector", "quaternion", "collision", "state machine"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cdf-keyword-hashes = "cdfengine.hashing:main"

[tool.hatch.build.targets.wheel]
packages = ["cdfengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
