[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fallible"
version = "0.1.0"
description = "Result, Option and tuple types with recoverable error handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["result", "option", "error-handling", "tuple", "functional"]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fallible"]

[tool.pytest.ini_options]
addopts = "-ra"
