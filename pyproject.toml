[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpchat"
version = "0.1.0"
description = "A minimal interactive TCP/IPv4 chat client and server that take turns exchanging one line at a time."
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "chat", "socket", "client", "server", "ipv4"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tcpchat-client = "tcpchat.client:main"
tcpchat-server = "tcpchat.server:main"

[tool.hatch.build.targets.wheel]
packages = ["tcpchat"]

[tool.pytest.ini_options]
addopts = "-ra"
