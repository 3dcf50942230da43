[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytracer"
version = "0.1.0"
description = "Building blocks for a ray tracer: a small YML scene reader, logging, images with PPM output, and lights."
requires-python = ">=3.10"
dependencies = []
keywords = ["raytracer", "rendering", "ppm", "yml", "scene", "lights"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raytracer"]

[tool.pytest.ini_options]
addopts = "-ra"
