[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Small classic algorithms: Fibonacci numbers, prime factors, Josephus, number spelling, sorting, page replacement, polynomial root finding and a minute-by-minute clock"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "fibonacci",
    "prime factors",
    "josephus",
    "quicksort",
    "permutations",
    "page replacement",
    "root finding",
    "bisection",
    "newton-raphson",
    "numerical methods",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-clock = "algokit.clock:main"
algokit-numbers = "algokit.number_theory:main"
algokit-spell = "algokit.spelling:main"
algokit-fib = "algokit.fibonacci:main"
algokit-sort = "algokit.sorting:main"
algokit-paging = "algokit.paging:main"
algokit-roots = "algokit.rootfinding:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.hatch.build.targets.sdist]
include = ["algokit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
