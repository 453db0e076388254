[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ncurtab"
version = "0.1.0"
description = "A two-panel terminal file manager with tabs"
requires-python = ">=3.10"
dependencies = []
keywords = ["file manager", "curses", "terminal", "tui", "tabs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ncurtab = "ncurtab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ncurtab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
