[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "k8up"
version = "0.1.0"
description = "Resource models, job status tracking, operator settings and tar.gz writing for a Kubernetes backup operator"
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "backup", "restic", "operator", "archive", "restore", "tar", "gzip"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Backup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["k8up"]

[tool.hatch.build.targets.sdist]
include = ["k8up", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
