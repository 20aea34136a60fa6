[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytekit"
version = "0.1.0"
description = "Small building blocks: wyhash, pseudo-random numbers, string helpers, a byte buffer cache, levelled logging, a sharded reader/writer lock and a thread task pool."
requires-python = ">=3.10"
dependencies = []
keywords = ["wyhash", "hash", "random", "strings", "buffer", "logging", "rwmutex", "thread pool"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bytekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
