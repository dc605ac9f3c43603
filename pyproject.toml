[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drtscen"
version = "0.1.0"
description = "Scenario test models, a JSON scenario writer and an in-memory blockchain world mock for smart contract testing."
requires-python = ">=3.10"
dependencies = []
keywords = ["scenario", "testing", "smart-contracts", "blockchain", "mock", "json"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drtscen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
