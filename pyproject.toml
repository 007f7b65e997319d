[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polymesh"
version = "1.0.0"
description = "Read polygonal meshes from CSV cell files and export them to AVS UCD ASCII for ParaView"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "polygonal mesh", "ucd", "paraview", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polymesh = "polymesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polymesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
