"""Building blocks for a cross-shell prompt: styled segments, toolchain versions, repository state and more."""

__version__ = "0.1.0"

__all__ = [
    "branch",
    "catalog",
    "clock",
    "dotnet",
    "environment",
    "gitinfo",
    "java_version",
    "kubernetes",
    "package",
    "paths",
    "rust_toolchain",
    "segment",
    "utils",
    "versions",
]