[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bsdkit"
version = "0.1.0"
description = "BSD-style utility routines: bounded string copying, range-checked number parsing, humanized sizes, file modes, vis decoding, sorting, pid files and passphrase reading"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bsd",
    "strlcpy",
    "strtonum",
    "humanize",
    "strmode",
    "setmode",
    "unvis",
    "radixsort",
    "mergesort",
    "pidfile",
    "readpassphrase",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bsdkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
