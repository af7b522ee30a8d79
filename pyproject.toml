[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmlite"
version = "1.0.0"
description = "A small, stack-driven XML parser that builds a document tree from UTF-8 input"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "parser", "dom", "utf-8", "well-formedness"]
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
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xmlite"]

[tool.pytest.ini_options]
addopts = "-ra"
