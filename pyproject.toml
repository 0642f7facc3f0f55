[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ordo"
version = "0.1.0"
description = "Canonical spellings, formatting and word forms for Latin vocabulary"
requires-python = ">=3.10"
dependencies = []
keywords = ["latin", "orthography", "macron", "linguistics", "declension"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Natural Language :: Latin",
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

[tool.hatch.build.targets.wheel]
packages = ["ordo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
