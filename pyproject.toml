[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compactstore"
version = "0.1.0"
description = "Compact binary storage of fixed-layout records with strings and 32-bit integers"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary", "serialization", "compact", "records", "big-endian"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compactstore-demo = "compactstore.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["compactstore"]

[tool.pytest.ini_options]
addopts = "-ra"
