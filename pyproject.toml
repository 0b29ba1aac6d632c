[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastchess"
version = "0.1.0"
description = "Core utilities for a chess engine tournament manager: checksums, logging, thread pools, caches and timing helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "tournament", "engine", "crc32", "threadpool", "logging", "cache"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fastchess"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
