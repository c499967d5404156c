"""Presence type: Present[T] | Absent for values that may simply not exist."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from warm_fuzzy_thing._internal import UNSET, fold_arguments, fold_operand
from warm_fuzzy_thing.errors import contract_violation

if TYPE_CHECKING:
    from warm_fuzzy_thing.outcome import Failure, Success

__all__ = [
    'Absent',
    'AbsentType',
    'Presence',
    'Present',
    'bind',
    'fmap',
    'fold',
    'is_absent',
    'is_present',
    'on_absent',
    'on_present',
    'pure',
    'sequence',
]

_EXPECTED = 'Present | Absent'


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Presence holding a value of type T.

    ``Present(None)`` is a present value; it is not Absent.

    Examples:
        >>> Present(1).map(lambda v: v + 1)
        Present(value=2)
        >>> Present('hello').bind(lambda v: Absent)
        Absent
    """

    value: T

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_absent(self) -> bool:
        """Return False since this is Present."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Present[U]:
        """Apply a total function to the value.

        Args:
            f: Function to apply to the present value.

        Returns:
            Present containing the result of f.
        """
        return Present(f(self.value))

    def bind[U](self, f: Callable[[T], Present[U] | AbsentType]) -> Present[U] | AbsentType:
        """Apply a function that returns a new Presence.

        Also known as flatmap or and_then.

        Raises:
            CallbackContractError: If f returns anything other than Present or Absent.
                A bare None counts as a violation, it is not read as Absent.
        """
        result = f(self.value)
        if isinstance(result, Present | AbsentType):
            return result
        raise contract_violation('presence.bind', result, _EXPECTED, callback=f)

    def fold[U](self, default_or_fn: Any, fn: Any = UNSET) -> U:
        """Apply the function to the value; the default is ignored."""
        _, f = fold_arguments(default_or_fn, fn)
        return f(self.value)

    def on_present(self, f: Callable[[T], Any]) -> Present[T]:
        """Call f with the value for side effects and return self."""
        f(self.value)
        return self

    def on_absent(self, f: Callable[[], Any]) -> Present[T]:  # noqa: ARG002
        """Return self unchanged since this is Present."""
        return self

    def to_outcome[E](self, reason: E) -> Success[T]:  # noqa: ARG002
        """Convert to Outcome, returning Success(value)."""
        from warm_fuzzy_thing.outcome import Success

        return Success(self.value)

    def __or__[U](self, f: Callable[[T], U]) -> Present[U]:
        """Map operator: ``Present(x) | f`` is ``Present(f(x))``."""
        return self.map(f)

    def __rshift__[U](self, f: Callable[[T], Present[U] | AbsentType]) -> Present[U] | AbsentType:
        """Bind operator: ``Present(x) >> f`` is ``f(x)``."""
        return self.bind(f)

    def __lshift__(self, operand: Any) -> Any:
        """Fold operator: ``Present(x) << f`` or ``Present(x) << (default, f)`` is ``f(x)``."""
        _, f = fold_operand(operand)
        return f(self.value)


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Presence. Carries no payload.

    Use the ``Absent`` singleton rather than instantiating directly; all
    instances compare equal anyway.

    Examples:
        >>> Absent.map(lambda v: v + 1)
        Absent
        >>> Absent.fold('not_found', lambda v: v + 1)
        'not_found'
    """

    def __repr__(self) -> str:
        return 'Absent'

    def is_present(self) -> bool:
        """Return False since this is Absent."""
        return False

    def is_absent(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent."""
        return True

    def map[T, U](self, f: Callable[[T], U]) -> AbsentType:  # noqa: ARG002
        """Return Absent since there's no value to map."""
        return self

    def bind[T, U](self, f: Callable[[T], Present[U] | AbsentType]) -> AbsentType:  # noqa: ARG002
        """Return Absent since there's no value to bind."""
        return self

    def fold[U](self, default_or_fn: Any, fn: Any = UNSET) -> U | None:
        """Return the default (None when omitted) without calling the function."""
        default, _ = fold_arguments(default_or_fn, fn)
        return default

    def on_present(self, f: Callable[[Any], Any]) -> AbsentType:  # noqa: ARG002
        """Return self unchanged since this is Absent."""
        return self

    def on_absent(self, f: Callable[[], Any]) -> AbsentType:
        """Call f with no arguments for side effects and return self."""
        f()
        return self

    def to_outcome[E](self, reason: E) -> Failure[E]:
        """Convert to Outcome, returning Failure(reason)."""
        from warm_fuzzy_thing.outcome import Failure

        return Failure(reason)

    def __or__(self, f: Callable[[Any], Any]) -> AbsentType:  # noqa: ARG002
        """Map operator returns Absent unchanged."""
        return self

    def __rshift__(self, f: Callable[[Any], Any]) -> AbsentType:  # noqa: ARG002
        """Bind operator returns Absent unchanged."""
        return self

    def __lshift__(self, operand: Any) -> Any:
        """Fold operator returns the default, or None for a bare function."""
        default, _ = fold_operand(operand)
        return default


Absent: AbsentType = AbsentType()
"""Singleton instance representing the absence of a value."""


type Presence[T] = Present[T] | AbsentType


def _require(value: object, operation: str) -> None:
    if not isinstance(value, Present | AbsentType):
        msg = f'{operation} expects Present or Absent, got {value!r}'
        raise TypeError(msg)


def is_present(value: object) -> TypeIs[Present[Any]]:
    """Return True if value is Present."""
    return isinstance(value, Present)


def is_absent(value: object) -> TypeIs[AbsentType]:
    """Return True if value is Absent."""
    return isinstance(value, AbsentType)


def pure[T](raw: T | None) -> Presence[T]:
    """Lift a raw value into a Presence: None (or Absent) becomes Absent, anything else Present(raw).

    Examples:
        >>> pure(1)
        Present(value=1)
        >>> pure(None)
        Absent
    """
    if raw is None or isinstance(raw, AbsentType):
        return Absent
    return Present(raw)


def fmap[T, U](presence: Presence[T], f: Callable[[T], U]) -> Presence[U]:
    """Apply f over the Present value; Absent passes through and f is not called."""
    _require(presence, 'presence.fmap')
    return presence.map(f)


def bind[T, U](presence: Presence[T], f: Callable[[T], Presence[U]]) -> Presence[U]:
    """Apply f, which returns a brand new Presence, over the Present value.

    Raises:
        CallbackContractError: If f returns anything other than Present or Absent.
    """
    _require(presence, 'presence.bind')
    return presence.bind(f)


def fold[T, U](presence: Presence[T], default_or_fn: Any, fn: Any = UNSET) -> U | None:
    """Unwrap a Presence: f(value) for Present, the default (None when omitted) for Absent."""
    _require(presence, 'presence.fold')
    return presence.fold(default_or_fn, fn)


def sequence[T](presences: Iterable[Presence[T]]) -> Presence[list[T]]:
    """Collect an iterable of Presences into a Presence of list.

    The first Absent short-circuits; an empty input gives Present([]).

    Raises:
        CallbackContractError: If an element is not a Presence.
    """
    values: list[T] = []
    for presence in presences:
        if isinstance(presence, AbsentType):
            return Absent
        if not isinstance(presence, Present):
            raise contract_violation('presence.sequence', presence, _EXPECTED)
        values.append(presence.value)
    return Present(values)


def on_present[T](presence: Presence[T], f: Callable[[T], Any]) -> Presence[T]:
    """Call f(value) on Present for its side effect; return the Presence unmodified."""
    _require(presence, 'presence.on_present')
    return presence.on_present(f)


def on_absent[T](presence: Presence[T], f: Callable[[], Any]) -> Presence[T]:
    """Call f() on Absent for its side effect; return the Presence unmodified."""
    _require(presence, 'presence.on_absent')
    return presence.on_absent(f)
