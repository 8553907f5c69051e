[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logarchive"
version = "0.1.0"
description = "Select files in zip archives of collected logs, parse host information, credential and cookie files, and bulk-index the results in Elasticsearch."
requires-python = ">=3.10"
dependencies = []
keywords = ["logs", "zip", "archive", "parsing", "cookies", "credentials", "elasticsearch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Information Technology",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logarchive"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
