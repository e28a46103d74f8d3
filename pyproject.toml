[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "magicsquare"
version = "0.1.0"
description = "Build, explode and spin a Rubik's cube made of cube and frustum units, and view it in 3D"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "matplotlib",
]
keywords = ["rubiks-cube", "3d", "mesh", "scene-graph", "animation", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
magicsquare = "magicsquare.app:main"

[tool.hatch.build.targets.wheel]
packages = ["magicsquare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
