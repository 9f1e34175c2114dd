[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecparams"
version = "0.1.0"
description = "Prime-field elliptic curve arithmetic over the SEC 2 curves: word-level big integers, GF(p), Montgomery form and point arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["elliptic curve", "ecc", "montgomery", "secp256r1", "prime field", "jacobian"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ecparams"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
