[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trackercore"
version = "0.1.0"
description = "Core building blocks for a music tracker: deferred event callbacks, instrument and sample models, binary readers and a file browser model"
requires-python = ">=3.10"
dependencies = []
keywords = ["tracker", "music", "instruments", "samples", "events", "observer"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trackercore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
