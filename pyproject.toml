[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluxbet"
version = "0.1.0"
description = "In-memory model of a group-based prediction betting platform with pools, odds and fee-adjusted payouts"
requires-python = ">=3.10"
dependencies = []
keywords = ["betting", "prediction", "odds", "groups", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluxbet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
