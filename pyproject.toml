[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unifuncs"
version = "0.1.0"
description = "Functions of a single real variable: exponential, logarithmic, power and polynomial."
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "functions", "exponential", "logarithm", "polynomial", "power"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unifuncs-demo = "unifuncs.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["unifuncs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
