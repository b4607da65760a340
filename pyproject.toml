[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "breezekit"
version = "6.4.80"
description = "Geometry, tile sets, box shadows, window-drag rules and settings for the Breeze widget style"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["breeze", "kde", "style", "theme", "shadow", "tileset", "window-drag"]
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
    "Topic :: Desktop Environment :: K Desktop Environment (KDE) :: Themes",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
breeze-to-breezelight = "breezekit.schememigrate:main"

[tool.hatch.build.targets.wheel]
packages = ["breezekit"]

[tool.pytest.ini_options]
addopts = "-ra"
