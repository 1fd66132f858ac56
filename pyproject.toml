[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyness"
version = "0.1.0"
description = "X11 colour names, XPM image parsing, pixel buffers and small text utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["xpm", "image", "colors", "pixels", "printf", "text"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skyness"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
