[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loxinterp"
version = "1.0.0"
description = "A tree-walking interpreter for a small subset of the Lox scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lox", "interpreter", "scripting", "language", "tree-walking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
loxinterp = "loxinterp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["loxinterp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
