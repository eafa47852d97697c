[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minihttpd"
version = "0.1.0"
description = "A minimal single-threaded HTTP server that parses requests and answers with a fixed greeting"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "socket", "request-parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minihttpd = "minihttpd.server:main"

[tool.hatch.build.targets.wheel]
packages = ["minihttpd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
