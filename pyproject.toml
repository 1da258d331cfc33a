[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alte"
version = "0.1.0"
description = "Core pieces of a lightweight text editor: rope buffer, JSON themes, language detection and editor geometry helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "rope", "themes", "language detection", "style sheets"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alte"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
