[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stockleague"
version = "1.0.0"
description = "Two small command interpreters: product and order logistics, and a football league tracker"
requires-python = ">=3.10"
dependencies = []
keywords = ["logistics", "inventory", "orders", "league", "football", "command-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stockleague-logistics = "stockleague.logistics:main"
stockleague-league = "stockleague.league_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stockleague"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
