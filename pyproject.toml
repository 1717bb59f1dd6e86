[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgebox"
version = "0.1.0"
description = "Classic programming-contest exercises solved as plain Python functions, with a command-line runner for the multi-case ones."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "contest", "exercises", "algorithms", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
judgebox = "judgebox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["judgebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
