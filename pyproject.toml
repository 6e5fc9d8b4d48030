[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "presterm"
version = "0.1.0"
description = "Building blocks for terminal presentations: styles, layout, window geometry, terminal commands, a virtual terminal and image printing."
requires-python = ">=3.10"
keywords = ["terminal", "presentation", "slides", "layout", "images", "virtual-terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Presentation",
    "Topic :: Terminals",
]
dependencies = [
    "pillow",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["presterm"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
