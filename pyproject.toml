[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "workbench"
version = "0.1.0"
description = "Small utilities and examples: line run counting, TSV dumping, a TCP echo server and client, concurrency helpers and a user API on SQLite."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["uniq", "tsv", "echo-server", "concurrency", "flask", "sqlite"]
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
    "Framework :: Flask",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
workbench-uniqc = "workbench.uniqc:main"
workbench-tsvdump = "workbench.tsvdump:main"
workbench-echo = "workbench.echo:main"
workbench-client = "workbench.client:main"
workbench-users = "workbench.users.app:main"

[tool.setuptools.packages.find]
include = ["workbench*"]

[tool.pytest.ini_options]
addopts = "-ra"
