[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clockturtle"
version = "0.1.0"
description = "Drive a simulated turtle to the position of a clock's minute hand, taken from the wall clock or from typed-in minutes."
requires-python = ">=3.10"
dependencies = []
keywords = ["turtle", "clock", "pose", "motion control", "robotics", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clockturtle-clock = "clockturtle.clock_pose:main"
clockturtle-guicli = "clockturtle.guicli_pose:main"
clockturtle-sim = "clockturtle.sim:main"

[tool.hatch.build.targets.wheel]
packages = ["clockturtle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
