[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pointbus"
version = "0.1.0"
description = "Point subscription routing and task function keyword parsing for data-point services"
requires-python = ">=3.10"
dependencies = []
keywords = ["subscription", "multicast", "broadcast", "points", "configuration", "parser"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pointbus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
