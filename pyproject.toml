[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sectorcaster"
version = "0.1.0"
description = "A small sector-based software renderer in the style of early first-person shooters"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "renderer", "sector", "portal", "software-rendering", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sectorcaster = "sectorcaster.game:main"

[tool.hatch.build.targets.wheel]
packages = ["sectorcaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
