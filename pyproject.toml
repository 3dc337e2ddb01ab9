[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zerokit"
version = "0.1.0"
description = "Small language tools: a backtracking regex engine, a linear type checker, a prefix calculator and assorted examples"
requires-python = ">=3.10"
keywords = [
    "regex",
    "regular-expression",
    "virtual-machine",
    "linear-types",
    "type-checker",
    "lambda-calculus",
    "parser",
    "calculator",
    "ackermann",
    "xorshift",
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
    "Topic :: Software Development :: Interpreters",
    "Topic :: Education",
]
dependencies = [
    "pyyaml",
    "msgpack",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zerokit-regex = "zerokit.regex_cli:main"
zerokit-linz = "zerokit.linz_cli:main"
zerokit-rpn = "zerokit.rpn:main"
zerokit-ackermann = "zerokit.ackermann:main"
zerokit-list-codec = "zerokit.list_codec:main"
zerokit-sort-bench = "zerokit.sort_bench:main"
zerokit-gallery = "zerokit.gallery:main"

[tool.hatch.build.targets.wheel]
packages = ["zerokit"]

[tool.hatch.build.targets.sdist]
include = ["zerokit", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
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
