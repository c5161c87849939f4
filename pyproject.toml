[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "railway3"
version = "0.1.0"
description = "A railway observation game that generates a map of districts, stations and rail lines and draws it in a window."
requires-python = ">=3.10"
dependencies = []
keywords = ["railway", "trains", "simulation", "map", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Ukrainian",
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
railway3 = "railway3.app:main"

[tool.hatch.build.targets.wheel]
packages = ["railway3"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
