[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tasktracker"
version = "0.1.0"
description = "A small command-line task tracker that keeps tasks in a plain text file."
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "cli", "tracker", "productivity"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
task-cli = "tasktracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tasktracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
