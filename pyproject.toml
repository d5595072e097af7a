[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shellpp"
version = "0.1.0"
description = "Building blocks for a Unix shell: wildcard matching, /proc process statistics, command history and background job tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "wildcard", "glob", "history", "jobs", "procfs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shellpp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
