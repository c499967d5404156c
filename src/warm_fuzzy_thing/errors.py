"""Error types raised by the containers themselves.

Domain failures travel as ``Failure(reason)`` / ``Absent`` values and are never
raised. The exceptions here signal programming defects in a chain.
"""

from __future__ import annotations

from typing import Any

from warm_fuzzy_thing._logging import get_logger

__all__ = [
    'CallbackContractError',
    'NoInstanceError',
    'contract_violation',
]


def _describe(callback: Any) -> str:
    """Return a readable name for a callable (qualified name when available)."""
    if callback is None:
        return '<none>'
    name = getattr(callback, '__qualname__', None) or getattr(callback, '__name__', None)
    return name if name is not None else repr(callback)


class CallbackContractError(TypeError):
    """A chained callback returned something that is not a container of the expected kind.

    Attributes:
        operation: Operation that detected the violation, e.g. ``'outcome.bind'``.
        callback: The offending callable, or None when the value did not come from one.
        returned: The value that broke the contract.
        expected: Human-readable description of the accepted shapes.
    """

    def __init__(
        self,
        operation: str,
        returned: Any,
        expected: str,
        callback: Any = None,
    ) -> None:
        self.operation = operation
        self.callback = callback
        self.returned = returned
        self.expected = expected
        if callback is None:
            msg = f'{operation}: expected {expected}, got {returned!r}'
        else:
            msg = f'Function {_describe(callback)} provided to {operation} should return {expected}, got {returned!r}'
        super().__init__(msg)


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


def contract_violation(
    operation: str,
    returned: Any,
    expected: str,
    callback: Any = None,
) -> CallbackContractError:
    """Log a contract violation and build the exception for the caller to raise.

    Example:
        ```python
        raise contract_violation('outcome.bind', result, 'Success | Failure', callback=f)
        ```
    """
    get_logger('warm_fuzzy_thing').error(
        'callback_contract_violated',
        operation=operation,
        callback=_describe(callback),
        returned_type=type(returned).__name__,
    )
    return CallbackContractError(operation, returned, expected, callback=callback)
