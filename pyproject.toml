[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hospitaldb"
version = "0.1.0"
description = "Record keeping for a hospital: wards, staff, patients, medications and supplies in an SQLite database"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["hospital", "sqlite", "records", "database", "front-end"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hospitaldb = "hospitaldb.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hospitaldb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
