[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emfield"
version = "0.1.0"
description = "Interactive electric field and potential visualizer for point charges"
requires-python = ">=3.10"
keywords = ["physics", "electrostatics", "electric field", "visualization", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
emfield = "emfield.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["emfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
