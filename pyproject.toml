[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "fmcconfig"
version = "1.4.0"
description = "Step settings, DR subsets and shareable preferences for a step-by-step fewest-moves Rubik's cube solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubiks-cube", "fmc", "fewest-moves", "cubing", "domino-reduction", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["fmcconfig"]

[tool.pytest.ini_options]
addopts = "-ra"
