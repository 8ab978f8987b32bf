[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algorithms"
version = "0.1.0"
description = "Classic algorithms and data structures: string matching, sorting, graphs and binary trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "kmp",
    "sorting",
    "minimum-spanning-tree",
    "strongly-connected-components",
    "topological-sort",
    "union-find",
    "binary-tree",
    "adjacency-multilist",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algorithms-kmp = "algorithms.kmp:main"
algorithms-sort = "algorithms.sorting:main"
algorithms-mst = "algorithms.mst:main"
algorithms-scc = "algorithms.scc:main"
algorithms-topo-sort = "algorithms.topo_sort:main"
algorithms-binary-tree = "algorithms.binary_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["algorithms"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
