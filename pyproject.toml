[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigin"
version = "0.1.0"
description = "A small component-based 2D game engine with scenes, transforms, input commands and a cache benchmark"
requires-python = ">=3.10"
keywords = ["game engine", "pygame", "components", "scene graph", "input", "benchmark"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minigin = "minigin.demos:main"
minigin-cache-ints = "minigin.cache_benchmark:main_ints"
minigin-cache-objects = "minigin.cache_benchmark:main_objects"

[tool.hatch.build.targets.wheel]
packages = ["minigin"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
