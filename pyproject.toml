[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "regcar"
version = "0.1.0"
description = "Fixed-record binary files with a chained hash index: a car registry, a ticket counter and a float log"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash table",
    "binary records",
    "registry",
    "index",
    "queue",
    "command line",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
regcar-cars = "regcar.cars_cli:main"
regcar-tickets = "regcar.tickets:main"
regcar-floatlog = "regcar.floatlog:main"

[tool.hatch.build.targets.wheel]
packages = ["regcar"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
