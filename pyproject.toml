[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldbuilder"
version = "0.1.0"
description = "Generate fluent builder classes for Python classes from their annotated fields"
requires-python = ">=3.10"
dependencies = []
keywords = ["builder", "code generation", "dataclass", "fluent interface", "decorator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fieldbuilder-demo = "fieldbuilder.command:main"

[tool.hatch.build.targets.wheel]
packages = ["fieldbuilder"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
