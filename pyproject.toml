[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbcommit"
version = "0.1.0"
description = "Deterministic bitcoin commitments: LNPBP-1 public key tweaks with single-key, keyset and taproot containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "secp256k1", "commitments", "lnpbp", "taproot", "cryptography"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dbcommit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
