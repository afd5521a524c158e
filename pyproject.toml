[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "etgkit"
version = "0.1.0"
description = "Engine-independent gameplay pieces for a top-down twin-stick shooter: state enums and flags, direction mapping, vector math, sprite batching, camera control, projectiles and HUD layout."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shooter", "sprite-batch", "hud", "vector-math", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["etgkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
