[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vslc"
version = "0.1.0"
description = "Front-end building blocks for the VSL language: types, syntax tree, pretty-printer, diagnostics and option parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "ast", "language", "vsl", "pretty-printer", "diagnostics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vslc"]

[tool.hatch.build.targets.sdist]
include = ["vslc", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
