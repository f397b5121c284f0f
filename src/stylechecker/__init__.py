"""House-style checker for single C++ source files."""

__version__ = "0.3.0"
