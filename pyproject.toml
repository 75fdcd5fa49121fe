[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treelab"
version = "0.1.0"
description = "Binary search trees, red-black trees and a handful of small teaching utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "red-black tree",
    "data structures",
    "queue",
    "statistics",
    "cipher",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treelab-bst = "treelab.bstcli:main"
treelab-rbt = "treelab.rbtcli:main"
treelab-grid = "treelab.grid:main"
treelab-filter = "treelab.filters:main"
treelab-athletes = "treelab.athletes:main"
treelab-validate = "treelab.validate:main"
treelab-queue = "treelab.intqueue:main"
treelab-stats = "treelab.statscli:main"

[tool.hatch.build.targets.wheel]
packages = ["treelab"]

[tool.hatch.build.targets.sdist]
include = ["treelab", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
