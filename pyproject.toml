[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ptcore"
version = "0.1.0"
description = "Building blocks for traceroute-style probing: bit-level packing, typed fields, value generators and callback-driven containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["traceroute", "networking", "bits", "fields", "generators", "containers"]
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
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ptcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
