[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edakit"
version = "0.1.0"
description = "Classic data structures (doubly linked list, stack), universal hashing, open-addressing probing and IPv4 address helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "stack", "universal hashing", "open addressing", "probing", "ipv4"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
