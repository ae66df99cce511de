[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fishingsettings"
version = "0.1.0"
description = "Generate, load and version-check the JSON settings file for a survival game fishing mod"
requires-python = ">=3.10"
dependencies = []
keywords = ["fishing", "game", "settings", "json", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fishingsettings = "fishingsettings.config:main"

[tool.hatch.build.targets.wheel]
packages = ["fishingsettings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
