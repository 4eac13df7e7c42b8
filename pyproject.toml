[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fnoverride"
version = "0.1.0"
description = "Instruct functions to return canned values, rewrite their arguments and check how often they were called."
requires-python = ">=3.10"
dependencies = []
keywords = ["mocking", "testing", "override", "stub", "test doubles"]
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
    "Topic :: Software Development :: Testing :: Mocking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fnoverride-amalgamate = "fnoverride.amalgamate:main"

[tool.hatch.build.targets.wheel]
packages = ["fnoverride"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
