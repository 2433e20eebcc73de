[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "navipanel"
version = "0.1.0"
description = "Keyboard-driven file panel logic: listings, marks, search, bookmarks and file operations"
requires-python = ">=3.10"
dependencies = []
keywords = ["file manager", "bookmarks", "desktop entry", "bulk rename", "file panel", "trash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["navipanel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
