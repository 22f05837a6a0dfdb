[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "covibe"
version = "0.1.0"
description = "Syntax tree node definitions and visitors for the CoVibe programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["ast", "compiler", "syntax-tree", "visitor", "covibe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["covibe"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
