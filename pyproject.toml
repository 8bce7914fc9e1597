[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "archlint"
version = "0.1.0"
description = "Architecture linting core: component specs, import globs, source references and report operations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "architecture",
    "linter",
    "imports",
    "dependencies",
    "static-analysis",
]
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
    "Topic :: Software Development :: Quality Assurance",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["archlint"]

[tool.hatch.build.targets.sdist]
include = ["archlint", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
