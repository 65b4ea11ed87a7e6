[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nightcastle"
version = "0.1.0"
description = "A small side-scrolling castle game on pygame: tile maps, sprite sheets, a grid of game objects and a bounded camera."
requires-python = ">=3.10"
keywords = ["game", "platformer", "side-scroller", "tilemap", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nightcastle = "nightcastle.app:main"

[tool.hatch.build.targets.wheel]
packages = ["nightcastle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
