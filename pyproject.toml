[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drills"
version = "0.1.0"
description = "Small command-line utilities: unit conversion, echo, duplicate-line counting, Lissajous GIFs, URL fetching and bit counting."
requires-python = ">=3.10"
keywords = [
    "unit conversion",
    "temperature",
    "lissajous",
    "gif",
    "popcount",
    "fetch",
    "command line",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
drills-cf = "drills.cf:main"
drills-units = "drills.units:main"
drills-echo = "drills.echo:main"
drills-dup = "drills.dup:main"
drills-lissajous-server = "drills.server:main"

[tool.hatch.build.targets.wheel]
packages = ["drills"]

[tool.hatch.build.targets.sdist]
include = ["drills", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
