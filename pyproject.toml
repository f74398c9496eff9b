[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "travelbook"
version = "0.1.0"
description = "Travel booking forms with field validation and cross-field checks, driven by a script of user actions"
requires-python = ">=3.10"
dependencies = []
keywords = ["booking", "travel", "forms", "validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
travelbook = "travelbook.app:main"

[tool.hatch.build.targets.wheel]
packages = ["travelbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
