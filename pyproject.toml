[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splcodegen"
version = "0.1.0"
description = "Code generator for the SPL teaching language, targeting the SSM stack machine and its BOF object file header"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "code generation", "stack machine", "SPL", "SSM", "BOF"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["splcodegen"]

[tool.hatch.build.targets.sdist]
include = ["splcodegen", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
