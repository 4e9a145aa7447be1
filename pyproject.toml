[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures and small algorithms: ordered sets, sorted and doubly linked lists, stacks, queues, binary search trees and AVL trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "linked-list",
    "stack",
    "queue",
    "binary-search-tree",
    "avl-tree",
    "radix-sort",
    "sieve",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-ordered-set = "structkit.ordered_set:main"
structkit-primes = "structkit.sorted_list:main"
structkit-list-length = "structkit.linked_length:main"
structkit-double-list = "structkit.double_list:main"
structkit-brackets = "structkit.stack:main"
structkit-radix-sort = "structkit.queue:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.hatch.build.targets.sdist]
include = ["structkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
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
