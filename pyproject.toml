[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigolf"
version = "0.1.0"
description = "An endless top-down mini golf game with procedurally generated walled paths"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["golf", "minigolf", "game", "pygame", "procedural", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minigolf = "minigolf.game:main"

[tool.hatch.build.targets.wheel]
packages = ["minigolf"]

[tool.pytest.ini_options]
addopts = "-ra"
