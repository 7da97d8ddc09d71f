[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "covkmeans"
version = "0.1.0"
description = "K-means clustering of numeric CSV data, with an optional multi-process assignment step"
requires-python = ">=3.10"
dependencies = []
keywords = ["kmeans", "clustering", "csv", "mersenne-twister", "covtype"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
covkmeans = "covkmeans.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["covkmeans"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
