[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seika"
version = "0.1.0"
description = "Bookkeeping for a 2D game renderer: string helpers, a thread pool, shader parameters, viewport maths, textures and z-ordered draw queues"
requires-python = ">=3.10"
keywords = ["game", "2d", "rendering", "sprites", "shaders", "thread-pool", "viewport"]
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
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["seika"]

[tool.pytest.ini_options]
addopts = "-ra"
