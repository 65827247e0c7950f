[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rendercore"
version = "0.1.0"
description = "Geometry, texture and camera helpers for real-time 3D rendering: OBJ loading, VBO indexing, tangent space, BMP/DDS parsing, text quads and ray picking."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "rendering", "obj", "dds", "bmp", "vbo", "tangent-space", "picking", "camera"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rendercore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
