[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ircchat"
version = "0.1.0"
description = "A minimal TCP chat server and client that exchange a single text message"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "tcp", "socket", "client", "server"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ircchat-server = "ircchat.server:main"
ircchat-client = "ircchat.client:main"

[tool.hatch.build.targets.wheel]
packages = ["ircchat"]

[tool.pytest.ini_options]
addopts = "-ra"
