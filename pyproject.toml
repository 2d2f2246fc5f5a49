[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dgengine"
version = "0.1.0"
description = "Core building blocks of a small game engine: messages, systems, shader reflection, texture data and serialization helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "glsl", "shader", "messages", "systems", "utf-8", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dgengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
