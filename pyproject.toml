[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "birdclient"
version = "0.1.0"
description = "A client for parts of the Twitter REST API v1.1: account verification, configuration, favorites and lists, with a stream message demultiplexer and back-off policies."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["twitter", "api", "client", "rest", "http"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["birdclient"]

[tool.hatch.build.targets.sdist]
include = ["birdclient", "tests"]

[tool.pytest.ini_options]
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
