[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledgerkit"
version = "0.1.0"
description = "Building blocks for a small blockchain: blocks, proof of work, Merkle trees, transaction pools, consensus and signing helpers"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["blockchain", "merkle", "proof-of-work", "proof-of-stake", "ledger", "utxo"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ledgerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
