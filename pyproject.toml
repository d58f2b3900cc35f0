[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bstdict"
version = "0.1.0"
description = "An ordered dictionary on a binary search tree, with a built-in cursor and a line-ordering command"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary search tree", "dictionary", "ordered map", "sorting", "cursor"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bstdict-order = "bstdict.order:main"

[tool.hatch.build.targets.wheel]
packages = ["bstdict"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
