[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tplib"
version = "0.1.0"
description = "Basic arithmetic operations with validation and a singly linked list container"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "arithmetic", "factorial", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tplib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
