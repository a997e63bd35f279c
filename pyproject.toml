[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parlang"
version = "0.2.0"
description = "Patterns, type syntax and Graphviz DOT rendering for a small ML-style functional language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "ast", "pattern-matching", "functional", "graphviz", "dot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
