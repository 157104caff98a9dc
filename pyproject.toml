[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tenpin"
version = "0.1.0"
description = "Ten-pin bowling scorekeeper with an interactive console game"
requires-python = ">=3.10"
dependencies = []
keywords = ["bowling", "ten-pin", "score", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tenpin = "tenpin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tenpin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
