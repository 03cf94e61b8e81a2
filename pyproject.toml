[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdrills"
version = "0.1.0"
description = "Classic data-structure and algorithm drills: linked lists, bounded stacks, postfix evaluation, searching, sorting, Fibonacci numbers and character-level string edits."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "linked-list",
    "stack",
    "postfix",
    "sorting",
    "searching",
    "education",
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
dsdrills = "dsdrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdrills"]

[tool.hatch.build.targets.sdist]
include = ["dsdrills", "tests", "README.md", "pyproject.toml"]

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
