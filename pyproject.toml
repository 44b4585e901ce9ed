[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicum"
version = "0.1.0"
description = "Small self-contained modules: 3D vectors and shapes, OBJ scene reading, a stack, a strict cursor, a result container, sorting, word counting, a War card game and reproducible random data"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "vector",
    "obj",
    "wavefront",
    "mersenne-twister",
    "random",
    "stack",
    "algorithms",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["practicum"]

[tool.pytest.ini_options]
addopts = "-ra"
