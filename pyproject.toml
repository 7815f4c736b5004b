[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starksqueeze"
version = "0.1.0"
description = "Dictionary-based dot encoding of files, with printable-ASCII conversion and compression reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "encoding", "ascii", "dictionary", "binary"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
starksqueeze = "starksqueeze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["starksqueeze"]

[tool.pytest.ini_options]
addopts = "-ra"
