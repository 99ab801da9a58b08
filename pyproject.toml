[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hudcore"
version = "0.1.0"
description = "Core logic for a performance HUD: option parsing, frame statistics, frame pacing, layout and GPU attribute helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["hud", "overlay", "fps", "monitoring", "frametime", "fcat", "gpu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hudcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
