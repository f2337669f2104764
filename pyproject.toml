[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logichain"
version = "0.0.2"
description = "A small educational blockchain: BLAKE2b hashing, Ed25519 wallets, UTXO transactions, proof-of-work blocks and a node."
requires-python = ">=3.10"
dependencies = [
    "pynacl",
]
keywords = ["blockchain", "utxo", "ed25519", "blake2b", "proof-of-work", "merkle", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["logichain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
