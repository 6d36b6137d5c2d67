[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyroute"
version = "0.1.0"
description = "Path planning helpers for aerial vehicles: geometry, Bezier smoothing, A* search and polar-histogram cost tools"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["path planning", "a-star", "bezier", "obstacle avoidance", "drone", "histogram"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skyroute"]

[tool.pytest.ini_options]
addopts = "-ra"
