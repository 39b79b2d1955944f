[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zomescaffold"
version = "0.1.0"
description = "Generate Rust source for Holochain zome entry types, link types and their CRUD handlers"
requires-python = ">=3.10"
dependencies = []
keywords = ["scaffolding", "code generation", "holochain", "zome", "rust"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zomescaffold"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
