[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctbigint"
version = "0.1.0"
description = "Fixed-width unsigned big integers built from 64-bit limbs"
requires-python = ">=3.10"
dependencies = []
keywords = ["bigint", "cryptography", "fixed-width", "arithmetic", "rlp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ctbigint"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
