[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dstructs"
version = "1.4.0"
description = "General-purpose sequence and queue structures: vector, deque, stack, queue and priority queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "vector", "deque", "stack", "queue", "priority queue", "ring buffer"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
