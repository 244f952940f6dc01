[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "canvascharts"
version = "0.21.3"
description = "Bar, pie, doughnut and line charts drawn onto a 2D canvas context, with HTML legends"
requires-python = ">=3.10"
dependencies = []
keywords = ["charts", "canvas", "visualization", "bar-chart", "pie-chart", "doughnut-chart", "line-chart"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["canvascharts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
