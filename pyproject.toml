[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "letterfreq"
version = "0.1.0"
description = "Count letter occurrences in a text and guess its language from letter frequencies"
requires-python = ">=3.10"
dependencies = []
keywords = ["letter frequency", "language detection", "text analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
letterfreq = "letterfreq.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["letterfreq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
