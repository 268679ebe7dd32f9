[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contest_solvers"
version = "0.1.0"
description = "Solutions to classic programming-contest problems: graph search, counting, exhaustive search and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "bfs",
    "dfs",
    "exhaustive-search",
    "prefix-sums",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contest-solvers = "contest_solvers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contest_solvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
