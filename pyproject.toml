[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsoncore"
version = "0.1.0"
description = "Building blocks for a JSON library: an insertion-ordered hash table, string hashing, a growable print buffer and number parsing helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "hash table", "linked hash", "lookup3", "buffer", "int64"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["jsoncore"]

[tool.hatch.build.targets.sdist]
include = ["jsoncore", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
