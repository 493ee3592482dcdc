[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parqcore"
version = "0.1.0"
description = "Parquet file-format building blocks: schema types, schema element conversion, statistics, dictionary pages and page levels."
requires-python = ">=3.10"
dependencies = []
keywords = ["parquet", "columnar", "file-format", "schema", "statistics"]
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
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parqcore"]

[tool.pytest.ini_options]
addopts = "-ra"
