[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavesurvivor"
version = "0.1.0"
description = "A top-down wave survival arcade game with timed enemy events and networked player positions"
requires-python = ">=3.10"
keywords = ["game", "arcade", "survival", "pygame", "roguelite"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wavesurvivor = "wavesurvivor.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wavesurvivor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
