[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordhash"
version = "0.1.0"
description = "FNV-1a hashing, an open-addressing word table, and simple key searches"
requires-python = ">=3.10"
dependencies = []
keywords = ["fnv", "fnv1a", "hash", "hash table", "linear probing", "binary search"]
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

[project.scripts]
wordhash = "wordhash.table:main"
wordhash-bsearch = "wordhash.search:main"
wordhash-lsearch = "wordhash.search:linear_main"

[tool.hatch.build.targets.wheel]
packages = ["wordhash"]

[tool.pytest.ini_options]
addopts = "-ra"
