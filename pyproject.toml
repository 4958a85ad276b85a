[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bfc"
version = "0.1.0"
description = "A Brainfuck compiler that emits aarch64 or x86_64 assembly and links it with a C toolchain driver"
requires-python = ">=3.10"
keywords = ["brainfuck", "compiler", "assembly", "aarch64", "x86_64"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bfc = "bfc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bfc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
