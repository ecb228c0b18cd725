[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netsystem"
version = "0.1.0"
description = "Character classification, Unicode categories, fixed-length arrays, byte-order and hashing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["unicode", "char", "utf-16", "surrogate", "endianness", "hash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["netsystem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
