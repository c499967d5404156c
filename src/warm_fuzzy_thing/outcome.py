"""Outcome type: Success[T] | Failure[E] for computations that can fail with a reason.

A chain of Outcome operations short-circuits: once a step produces a Failure,
every later step is skipped and that Failure is handed back unchanged.

Example:
    ```python
    from warm_fuzzy_thing import outcome
    from warm_fuzzy_thing.outcome import Failure, Success

    def parse_age(raw: str) -> outcome.Outcome[int, str]:
        return Success(int(raw)) if raw.isdigit() else Failure('not a number')

    outcome.bind(Success('42'), parse_age)
    # Success(value=42)

    (Success('abc') >> parse_age) << (0, lambda age: age + 1)
    # 0
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from warm_fuzzy_thing._internal import UNSET, fold_arguments, fold_operand
from warm_fuzzy_thing.errors import contract_violation

if TYPE_CHECKING:
    from warm_fuzzy_thing.presence import AbsentType, Present

__all__ = [
    'Failure',
    'Outcome',
    'Success',
    'bind',
    'fmap',
    'fold',
    'is_failure',
    'is_success',
    'map_failure',
    'on_failure',
    'on_success',
    'pure',
    'sequence',
]

_EXPECTED = 'Success | Failure'


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Outcome holding a value of type T.

    Examples:
        >>> Success(1).map(lambda v: v + 1)
        Success(value=2)
        >>> Success(1).bind(lambda v: Failure('bad'))
        Failure(reason='bad')
        >>> Success(1).fold(0, lambda v: v + 1)
        2
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_failure(self) -> bool:
        """Return False since this is Success."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Apply a total function to the value.

        Args:
            f: Function to apply to the success value. It must not signal failure itself.

        Returns:
            Success containing the result of f.
        """
        return Success(f(self.value))

    def bind[U, F](self, f: Callable[[T], Success[U] | Failure[F]]) -> Success[U] | Failure[F]:
        """Apply a function that returns a new Outcome.

        Args:
            f: Function that takes the value and returns Success or Failure.

        Returns:
            The Outcome returned by f.

        Raises:
            CallbackContractError: If f returns anything other than Success or Failure.
        """
        result = f(self.value)
        if isinstance(result, Success | Failure):
            return result
        raise contract_violation('outcome.bind', result, _EXPECTED, callback=f)

    def fold[U](self, default_or_fn: Any, fn: Any = UNSET) -> U:
        """Apply the function to the value; the default is ignored.

        Accepts ``fold(f)`` or ``fold(default, f)``.
        """
        _, f = fold_arguments(default_or_fn, fn)
        return f(self.value)

    def on_success(self, f: Callable[[T], Any]) -> Success[T]:
        """Call f with the value for side effects and return self."""
        f(self.value)
        return self

    def on_failure(self, f: Callable[[Any], Any]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def map_failure[F](self, f: Callable[[Any], F]) -> Success[T]:  # noqa: ARG002
        """Return self unchanged since this is Success."""
        return self

    def to_presence(self) -> Present[T]:
        """Convert to Presence, returning Present(value)."""
        from warm_fuzzy_thing.presence import Present

        return Present(self.value)

    def __or__[U](self, f: Callable[[T], U]) -> Success[U]:
        """Map operator: ``Success(x) | f`` is ``Success(f(x))``."""
        return self.map(f)

    def __rshift__[U, F](self, f: Callable[[T], Success[U] | Failure[F]]) -> Success[U] | Failure[F]:
        """Bind operator: ``Success(x) >> f`` is ``f(x)``."""
        return self.bind(f)

    def __lshift__(self, operand: Any) -> Any:
        """Fold operator: ``Success(x) << f`` or ``Success(x) << (default, f)`` is ``f(x)``."""
        _, f = fold_operand(operand)
        return f(self.value)


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Outcome holding a reason of type E.

    Every value-side operation returns the Failure unchanged without calling
    the supplied function.

    Examples:
        >>> Failure('x').map(lambda v: v + 1)
        Failure(reason='x')
        >>> Failure('x').fold(0, lambda v: v + 1)
        0
        >>> Failure('x').fold(lambda v: v + 1) is None
        True
    """

    reason: E

    def is_success(self) -> bool:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure[E]]:
        """Return True since this is Failure."""
        return True

    def map[T, U](self, f: Callable[[T], U]) -> Failure[E]:  # noqa: ARG002
        """Return self unchanged since this is Failure."""
        return self

    def bind[T, U, F](self, f: Callable[[T], Success[U] | Failure[F]]) -> Failure[E]:  # noqa: ARG002
        """Return self unchanged since this is Failure."""
        return self

    def fold[U](self, default_or_fn: Any, fn: Any = UNSET) -> U | None:
        """Return the default (None when omitted) without calling the function."""
        default, _ = fold_arguments(default_or_fn, fn)
        return default

    def on_success(self, f: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        """Return self unchanged since this is Failure."""
        return self

    def on_failure(self, f: Callable[[E], Any]) -> Failure[E]:
        """Call f with the reason for side effects and return self."""
        f(self.reason)
        return self

    def map_failure[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the reason.

        Args:
            f: Function to apply to the failure reason.

        Returns:
            Failure containing the transformed reason.
        """
        return Failure(f(self.reason))

    def to_presence(self) -> AbsentType:
        """Convert to Presence, returning Absent. The reason is discarded."""
        from warm_fuzzy_thing.presence import Absent

        return Absent

    def __or__(self, f: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        """Map operator returns self unchanged for Failure."""
        return self

    def __rshift__(self, f: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        """Bind operator returns self unchanged for Failure."""
        return self

    def __lshift__(self, operand: Any) -> Any:
        """Fold operator returns the default, or None for a bare function."""
        default, _ = fold_operand(operand)
        return default


type Outcome[T, E = Any] = Success[T] | Failure[E]


def _require(value: object, operation: str) -> None:
    if not isinstance(value, Success | Failure):
        msg = f'{operation} expects Success or Failure, got {value!r}'
        raise TypeError(msg)


def is_success(value: object) -> TypeIs[Success[Any]]:
    """Return True if value is a Success."""
    return isinstance(value, Success)


def is_failure(value: object) -> TypeIs[Failure[Any]]:
    """Return True if value is a Failure."""
    return isinstance(value, Failure)


def pure[T, E](raw: T | Failure[E]) -> Outcome[T, E]:
    """Lift a raw value into an Outcome.

    A Failure passed in is returned as is; anything else, None included,
    becomes Success(raw).

    Examples:
        >>> pure(1)
        Success(value=1)
        >>> pure(Failure('not_found'))
        Failure(reason='not_found')
    """
    if isinstance(raw, Failure):
        return raw
    return Success(raw)


def fmap[T, U, E](outcome: Outcome[T, E], f: Callable[[T], U]) -> Outcome[U, E]:
    """Apply f over the Success value; a Failure passes through and f is not called."""
    _require(outcome, 'outcome.fmap')
    return outcome.map(f)


def bind[T, U, E, F](outcome: Outcome[T, E], f: Callable[[T], Outcome[U, F]]) -> Outcome[U, E | F]:
    """Apply f, which returns a brand new Outcome, over the Success value.

    The result of f may flip the variant. A Failure passes through and f is not called.

    Raises:
        CallbackContractError: If f returns anything other than Success or Failure.
    """
    _require(outcome, 'outcome.bind')
    return outcome.bind(f)


def fold[T, U](outcome: Outcome[T, Any], default_or_fn: Any, fn: Any = UNSET) -> U | None:
    """Unwrap an Outcome: f(value) for Success, the default for Failure.

    Called as ``fold(outcome, f)`` or ``fold(outcome, default, f)``. The default is
    None when omitted.

    Examples:
        >>> fold(Success(1), 0, lambda v: v + 1)
        2
        >>> fold(Failure('x'), 0, lambda v: v + 1)
        0
    """
    _require(outcome, 'outcome.fold')
    return outcome.fold(default_or_fn, fn)


def sequence[T, E](outcomes: Iterable[Outcome[T, E]]) -> Outcome[list[T], E]:
    """Collect an iterable of Outcomes into an Outcome of list.

    Reduces left to right and stops at the first Failure, which is returned
    even if later elements would fail too. Elements after it are not consumed.

    Returns:
        Success(list[T]) in input order if all are Success, otherwise the first Failure.

    Raises:
        CallbackContractError: If an element is not an Outcome.

    Examples:
        >>> sequence([Success(1), Success(2)])
        Success(value=[1, 2])
        >>> sequence([Success(1), Failure('e1'), Success(2), Failure('e2')])
        Failure(reason='e1')
    """
    values: list[T] = []
    for outcome in outcomes:
        if isinstance(outcome, Failure):
            return outcome
        if not isinstance(outcome, Success):
            raise contract_violation('outcome.sequence', outcome, _EXPECTED)
        values.append(outcome.value)
    return Success(values)


def on_success[T, E](outcome: Outcome[T, E], f: Callable[[T], Any]) -> Outcome[T, E]:
    """Call f(value) on Success for its side effect; return the Outcome unmodified."""
    _require(outcome, 'outcome.on_success')
    return outcome.on_success(f)


def on_failure[T, E](outcome: Outcome[T, E], f: Callable[[E], Any]) -> Outcome[T, E]:
    """Call f(reason) on Failure for its side effect; return the Outcome unmodified."""
    _require(outcome, 'outcome.on_failure')
    return outcome.on_failure(f)


def map_failure[T, E, F](outcome: Outcome[T, E], f: Callable[[E], F]) -> Outcome[T, F]:
    """Transform the Failure reason. A Success passes through untouched."""
    _require(outcome, 'outcome.map_failure')
    return outcome.map_failure(f)
