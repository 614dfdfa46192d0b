[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "streamcatalog"
version = "1.0.0"
description = "A small catalogue of movies and series with ratings, averages and text listings."
requires-python = ">=3.10"
dependencies = []
keywords = ["streaming", "catalog", "movies", "series", "episodes", "ratings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
streamcatalog = "streamcatalog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["streamcatalog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
