[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "printqueue"
version = "1.0.0"
description = "Priority print queue with user registry, print history and statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["printing", "queue", "priority", "history", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Printing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
printqueue = "printqueue.cli:main"

[tool.setuptools.packages.find]
include = ["printqueue*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
