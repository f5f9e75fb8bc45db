[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avlkit"
version = "0.1.0"
description = "A self-balancing AVL tree with custom ordering, traversals, functional helpers and an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "tree", "balanced", "binary-search-tree", "data-structures"]
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

[project.scripts]
avlkit = "avlkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["avlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
