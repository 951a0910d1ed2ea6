[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinysc"
version = "0.1.0"
description = "A tiny Scheme-like expression interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheme", "lisp", "interpreter", "s-expression"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinysc = "tinysc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinysc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
