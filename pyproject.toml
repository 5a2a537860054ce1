[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightningsearch"
version = "0.1.0"
description = "Multi-threaded file search by name and contents"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "files", "find", "filesystem", "regex", "threads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lightningsearch = "lightningsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lightningsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
