[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practice_kit"
version = "0.1.0"
description = "A collection of small practice exercises: games, counters, dates, strings and arithmetic."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "practice", "education", "kata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["practice_kit"]

[tool.pytest.ini_options]
addopts = "-ra"
