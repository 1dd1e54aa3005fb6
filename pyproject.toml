[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gomato"
version = "0.1.0"
description = "A terminal Pomodoro timer with a persistent task list"
requires-python = ">=3.10"
keywords = ["pomodoro", "timer", "productivity", "terminal", "tui"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gomato = "gomato.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gomato"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
