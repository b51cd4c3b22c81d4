[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninetools"
version = "0.1.0"
description = "Bitcoin price lookup, an RPN calculator and Ford-Johnson merge-insertion sort"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "rpn", "calculator", "merge-insertion", "ford-johnson", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
btc = "ninetools.bitcoin:main"
RPN = "ninetools.rpn:main"
PmergeMe = "ninetools.pmerge:main"

[tool.hatch.build.targets.wheel]
packages = ["ninetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
