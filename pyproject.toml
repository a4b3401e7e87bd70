[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "rayforge"
version = "0.1.0"
description = "Geometry, color and image building blocks for a small ray caster"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["ray tracing", "geometry", "bounding box", "matrix", "quadtree", "color"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["rayforge*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
