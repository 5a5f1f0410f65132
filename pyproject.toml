[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "univ3math"
version = "4.0.0"
description = "Exact integer math for concentrated-liquidity AMM pools: full-precision mul-div, sqrt price deltas, liquidity, tick lists and pool addresses"
requires-python = ">=3.10"
keywords = ["uniswap-v3", "amm", "ethereum", "defi", "liquidity", "fixed-point"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["univ3math"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
