[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "computor"
version = "1.0.0"
description = "Reduce and solve polynomial equations of degree up to two."
requires-python = ">=3.10"
dependencies = []
keywords = ["polynomial", "equation", "solver", "quadratic", "calculator"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
computor = "computor.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["computor"]

[tool.pytest.ini_options]
addopts = "-ra"
