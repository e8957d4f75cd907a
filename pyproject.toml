[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raywave"
version = "0.1.0"
description = "Building blocks for a small ray tracer: random numbers, samplers, geometry, simple shapes and textures"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "pcg32", "halton", "textures", "graphics"]
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
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raywave"]

[tool.pytest.ini_options]
addopts = "-ra"
