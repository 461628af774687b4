[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crownflame"
version = "0.1.0"
description = "Scene definitions, validation, templates, scene files, transitions, settings and tile maps for a small 2D game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "scene", "tilemap", "level-design", "settings"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crownflame"]

[tool.pytest.ini_options]
addopts = "-ra"
