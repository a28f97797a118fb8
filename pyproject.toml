[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gadgetry"
version = "0.1.0"
description = "Small everyday helpers: strings, lists, file system, vectors, matrices and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "helpers", "strings", "filesystem", "vectors", "matrices", "wildcards"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gadgetry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
