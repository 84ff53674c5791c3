[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "faaskit"
version = "0.1.0"
description = "Helpers for deploying, describing and invoking serverless functions and handling their templates and registry credentials"
requires-python = ">=3.10"
dependencies = []
keywords = ["serverless", "functions", "docker", "faas", "deploy", "templates"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["faaskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
