[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mystat"
version = "0.1.0"
description = "A small arithmetic library: double an integer and add one"
requires-python = ">=3.10"
dependencies = []
keywords = ["arithmetic", "integer", "library"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mystat-example = "mystat.example:main"

[tool.hatch.build.targets.wheel]
packages = ["mystat"]

[tool.pytest.ini_options]
addopts = "-ra"
