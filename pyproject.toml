[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leapup"
version = "0.1.0"
description = "Leap Up: a vertical platform-jumping arcade game with fireballs and shield power-ups"
requires-python = ">=3.10"
keywords = ["game", "arcade", "platformer", "pygame", "jumping"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
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
leapup = "leapup.app:main"

[tool.hatch.build.targets.wheel]
packages = ["leapup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
