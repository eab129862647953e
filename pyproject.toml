[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsadrills"
version = "0.1.0"
description = "Classic array, matrix and graph algorithms, most with a brute-force and an efficient variant."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "arrays", "graphs", "interview practice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsadrills"]

[tool.pytest.ini_options]
addopts = "-ra"
