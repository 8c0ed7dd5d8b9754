[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyinvaders"
version = "0.1.0"
description = "A small vertical space shooter: a swaying formation of enemy ships, a player cannon and falling beams."
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "pygame", "invaders"]
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
tinyinvaders = "tinyinvaders.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyinvaders"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
