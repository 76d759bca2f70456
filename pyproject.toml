[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ehrplus"
version = "0.1.0"
description = "Command-line companion for EHRPlus: YAML configuration, a Docker container picker and an interactive demo menu"
requires-python = ">=3.10"
keywords = ["cli", "docker", "containers", "terminal", "demo", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "click>=8.1",
    "pyyaml>=6.0",
    "httpx>=0.24",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
ehrplus-cli = "ehrplus.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ehrplus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
