[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gemini-he"
version = "0.1.0"
description = "Plaintext-side helpers for homomorphic secret-shared convolution and batch norm: tensor shapes, convolution shape inference, coefficient encoding, packing and Boolean triple checks."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "homomorphic encryption",
    "secure computation",
    "secret sharing",
    "convolution",
    "tensor encoding",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gemini_he"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
