[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bwhdesk"
version = "0.1.0"
description = "Console dashboard and server-list manager for VPS accounts controlled over an HTTP API"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["vps", "dashboard", "server", "administration", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
bwhdesk = "bwhdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bwhdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
