[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "go2web"
version = "0.1.0"
description = "Command-line HTTP client that prints readable page text and searches the web"
requires-python = ">=3.10"
keywords = ["http", "cli", "search", "html", "json", "duckduckgo", "sockets"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
go2web = "go2web.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["go2web"]

[tool.pytest.ini_options]
addopts = "-ra"
