"""Small integer arithmetic helpers."""

from __future__ import annotations

__all__ = ["add_one", "double_and_add_one"]


def _require_int(x: object) -> int:
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"expected an int, got {type(x).__name__}")
    return x


def _multiply_by_two(x: int) -> int:
    return 2 * x


def add_one(x: int) -> int:
    """Return ``x + 1``."""
    return _require_int(x) + 1


def double_and_add_one(x: int) -> int:
    """Return ``2 * x + 1``."""
    return add_one(_multiply_by_two(_require_int(x)))