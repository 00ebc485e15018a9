"""Square matrices with arithmetic operators, determinant and sum-based comparison."""

__version__ = "0.1.0"
__all__ = ["matrix", "cli"]