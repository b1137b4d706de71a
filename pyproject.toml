[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "remoteid"
version = "0.2.0.dev0"
description = "Build, validate and serialise ASTM F3411 drone Remote ID messages"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "remote id",
    "drone",
    "uas",
    "astm f3411",
    "broadcast",
]
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
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["remoteid"]

[tool.hatch.build.targets.sdist]
include = ["remoteid", "tests", "README.md", "pyproject.toml"]

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
files = ["remoteid"]
