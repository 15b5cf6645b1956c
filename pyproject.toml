[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightotel"
version = "0.1.0"
description = "A small, dependency-free tracing library modelled on the OpenTelemetry span and tracer interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["tracing", "opentelemetry", "spans", "observability", "telemetry"]
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
    "Topic :: System :: Monitoring",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lightotel-hello-world = "lightotel.hello_world:main"

[tool.hatch.build.targets.wheel]
packages = ["lightotel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
