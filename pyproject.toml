[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures: a dynamic array, linked lists, a graph, a hash table, a min-heap, a disjoint set and a trie."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "dynamic array",
    "linked list",
    "heap",
    "trie",
    "union-find",
    "hash table",
    "graph",
]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-graph = "structkit.graph:main"
structkit-hash-table = "structkit.hash_table:main"
structkit-min-heap = "structkit.min_heap:main"
structkit-disjoint-set = "structkit.disjoint_set:main"
structkit-trie = "structkit.trie:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
