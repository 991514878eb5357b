[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "omicshelp"
version = "0.3.1"
description = "Shared --help renderer for command-line tools: FIGlet banner with a colour gradient, aligned flag tables, and plain and JSON modes for scripts and AI consumers."
requires-python = ">=3.10"
dependencies = []
keywords = ["help", "cli", "ansi", "figlet", "ascii-art", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["omicshelp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
