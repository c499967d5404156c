"""Argument handling shared by the Outcome and Presence fold operations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final

__all__ = ['UNSET', 'fold_arguments', 'fold_operand']


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return '<unset>'


UNSET: Final = _Unset()


def fold_arguments(default_or_fn: Any, fn: Any = UNSET) -> tuple[Any, Callable[[Any], Any]]:
    """Resolve ``fold(m, f)`` and ``fold(m, default, f)`` into ``(default, f)``.

    The default is None when only a function is supplied.

    Raises:
        TypeError: If the function is not callable.
    """
    if fn is UNSET:
        default, fn = None, default_or_fn
    else:
        default = default_or_fn
    if not callable(fn):
        msg = f'fold expects a callable, got {fn!r}'
        raise TypeError(msg)
    return default, fn


def fold_operand(operand: Any) -> tuple[Any, Callable[[Any], Any]]:
    """Resolve the right operand of ``<<``: a function or a ``(default, function)`` pair."""
    if callable(operand):
        return None, operand
    if isinstance(operand, tuple) and len(operand) == 2:  # noqa: PLR2004
        return fold_arguments(*operand)
    msg = f'fold operator expects a function or a (default, function) pair, got {operand!r}'
    raise TypeError(msg)
