[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstqueue"
version = "0.1.0"
description = "Binary search tree, ordered search queue and vertex utilities, with a tree-building timing command"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "bst", "priority queue", "search queue", "data structures", "vertex"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstqueue = "bstqueue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bstqueue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
