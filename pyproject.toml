[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floof"
version = "0.1.0"
description = "Play a collection of cat sounds by name or at random"
requires-python = ">=3.10"
keywords = ["audio", "sound", "cat", "meow", "playback"]
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
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
meow = "floof.meow:main"

[tool.hatch.build.targets.wheel]
packages = ["floof"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
