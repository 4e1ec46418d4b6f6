[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quippy"
version = "0.1.0"
description = "Value model and interpreter state for the quippy scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "language", "dynamic-typing", "values"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
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
packages = ["quippy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
