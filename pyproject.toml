[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tensor-eigen"
version = "0.1.0"
description = "Library for Solana addresses, Anchor discriminators and error codes, Raydium pool layouts and fee shards"
requires-python = ">=3.10"
keywords = ["solana", "anchor", "raydium", "base58", "discriminator", "pda"]
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
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tensor_eigen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
