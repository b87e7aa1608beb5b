[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stdtour"
version = "0.1.0"
description = "Sorted linked lists, numeric folds and scans, filesystem helpers, geometric objects, subsequence searchers and small utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linked-list",
    "algorithms",
    "scan",
    "reduce",
    "filesystem",
    "geometry",
    "boyer-moore",
    "horspool",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stdtour-checkpath = "stdtour.fsinfo:main"
stdtour-geobench = "stdtour.geobench:main"
stdtour-search = "stdtour.searching:main"

[tool.hatch.build.targets.wheel]
packages = ["stdtour"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
