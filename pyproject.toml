[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyracer"
version = "0.1.0"
description = "A terminal arcade game: steer your ship, shoot falling meteors and keep a ranking of scores."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "terminal", "curses", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skyracer = "skyracer.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["skyracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
