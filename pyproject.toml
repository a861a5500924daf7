[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "texsolve"
version = "0.1.0"
description = "Lexer, expression tree and readable error reports for LaTeX-style math expressions"
requires-python = ">=3.10"
dependencies = []
keywords = ["latex", "math", "lexer", "tokenizer", "expression"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: LaTeX",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
texsolve = "texsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["texsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
