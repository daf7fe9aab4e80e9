[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motionkit"
version = "0.1.0"
description = "Trapezoidal motion profiles, wrench frame transforms and checked YAML configuration parsing"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["motion", "trajectory", "trapezoidal profile", "quaternion", "wrench", "yaml", "robotics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["motionkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
