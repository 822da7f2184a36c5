[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astroprompt"
version = "0.1.0"
description = "Building blocks for a cross-shell prompt: toolchain version detection, repository state, styled segments and more."
requires-python = ">=3.11"
keywords = ["prompt", "shell", "bash", "fish", "zsh", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
    "regex",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["astroprompt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
