[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lispbox"
version = "1.0.0"
description = "Core of a small Scheme-flavoured Lisp: values, environments, errors and built-in functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "scheme", "interpreter", "builtins", "functional"]
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
    "Topic :: Software Development :: Interpreters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lispbox"]

[tool.pytest.ini_options]
addopts = "-ra"
