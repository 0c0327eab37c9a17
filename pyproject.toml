[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brsjudge"
version = "0.1.0"
description = "Timing judgment, groove gauge and lane mapping rules for BMS rhythm games"
requires-python = ">=3.10"
dependencies = []
keywords = ["bms", "rhythm-game", "judge", "gauge", "beatoraja", "lr2"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["brsjudge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
