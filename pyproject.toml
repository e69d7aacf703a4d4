[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbhw"
version = "0.1.0"
description = "Game Boy hardware building blocks: a memory bus with region locking and a cartridge header reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["game boy", "emulator", "memory bus", "cartridge", "dmg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gbhw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
