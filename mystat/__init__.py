"""Small arithmetic library: add one, or double an integer and add one."""

__version__ = "0.1.0"
__all__ = ["calc", "example"]