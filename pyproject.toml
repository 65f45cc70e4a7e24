[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zbalancer"
version = "0.1.0"
description = "A ZeroMQ ROUTER/ROUTER load balancer dispatching client requests to available workers"
requires-python = ">=3.10"
keywords = ["zeromq", "zmq", "load-balancer", "router", "broker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
    "Topic :: System :: Networking",
]
dependencies = [
    "pyzmq",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-timeout",
]

[tool.hatch.build.targets.wheel]
packages = ["zbalancer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
