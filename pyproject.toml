[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dailyalgos"
version = "0.1.0"
description = "Small, tested implementations of classic search, bit, array and linked-list algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "binary-search", "linked-list", "bit-manipulation", "boyer-moore"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dailyalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
