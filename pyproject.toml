[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ridemap"
version = "0.1.0"
description = "A small terminal ride-share simulation that matches customers with drivers on a city grid map."
requires-python = ">=3.10"
dependencies = []
keywords = ["rideshare", "simulation", "grid", "terminal", "map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ridemap = "ridemap.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["ridemap"]

[tool.pytest.ini_options]
addopts = "-ra"
