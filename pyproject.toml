[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshsculpt"
version = "0.1.0"
description = "Bezier patches, free-form and twist deformations, and small mesh utilities in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mesh",
    "bezier",
    "bernstein",
    "deformation",
    "free-form deformation",
    "ffd",
    "twist",
    "obj",
    "geometry",
]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshsculpt"]

[tool.hatch.build.targets.sdist]
include = ["meshsculpt", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
