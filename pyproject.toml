[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "renderkit"
version = "0.1.0"
description = "3D math, scene management and rendering bookkeeping for a small real-time game engine"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = [
    "3d",
    "rendering",
    "matrix",
    "quaternion",
    "scene",
    "game-engine",
    "serial",
]
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
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["renderkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
