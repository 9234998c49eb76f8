[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interview_tasks"
version = "0.1.0"
description = "Small concurrency and caching building blocks: TTL and LRU caches, a rate limiter, a worker pool, iterable merging, a URL checker and a tiny key-value HTTP service."
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "lru", "ttl", "rate-limiter", "worker-pool", "concurrency", "http"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
interview-tasks-server = "interview_tasks.http_server:main"

[tool.hatch.build.targets.wheel]
packages = ["interview_tasks"]

[tool.pytest.ini_options]
addopts = "-ra"
