"""Container-generic operations shared by Outcome and Presence.

Each function here is a typeclass that dispatches on the runtime variant of
its first argument to the Outcome or Presence implementation, so code that
does not care which kind of container it holds can still chain over it.

``pure`` and ``sequence`` have nothing to dispatch on and live in the
``outcome`` and ``presence`` modules only.

Example:
    ```python
    from warm_fuzzy_thing import monad

    monad.fmap(Success(1), lambda v: v + 1)  # Success(value=2)
    monad.fmap(Present(1), lambda v: v + 1)  # Present(value=2)
    monad.fold(Absent, 'none', str)          # 'none'
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

from warm_fuzzy_thing import outcome, presence
from warm_fuzzy_thing._internal import UNSET
from warm_fuzzy_thing.outcome import Failure, Success
from warm_fuzzy_thing.presence import AbsentType, Present
from warm_fuzzy_thing.typeclass import typeclass

__all__ = [
    'bind',
    'fmap',
    'fold',
    'identity',
    'is_container',
    'on_empty',
    'on_value',
]


def identity[T](value: T) -> T:
    """Return value unchanged. Handy as a fold function."""
    return value


def is_container(value: object) -> TypeIs[Success[Any] | Failure[Any] | Present[Any] | AbsentType]:
    """Return True for any Outcome or Presence variant."""
    return isinstance(value, Success | Failure | Present | AbsentType)


@typeclass
def fmap(container: Any, f: Callable[[Any], Any]) -> Any:
    """Apply f over the held value, leaving the empty variant untouched."""


@fmap.instance(Success)
@fmap.instance(Failure)
def _fmap_outcome(container: Any, f: Callable[[Any], Any]) -> Any:
    return outcome.fmap(container, f)


@fmap.instance(Present)
@fmap.instance(AbsentType)
def _fmap_presence(container: Any, f: Callable[[Any], Any]) -> Any:
    return presence.fmap(container, f)


@typeclass
def bind(container: Any, f: Callable[[Any], Any]) -> Any:
    """Apply f, which must return a container of the same kind, over the held value."""


@bind.instance(Success)
@bind.instance(Failure)
def _bind_outcome(container: Any, f: Callable[[Any], Any]) -> Any:
    return outcome.bind(container, f)


@bind.instance(Present)
@bind.instance(AbsentType)
def _bind_presence(container: Any, f: Callable[[Any], Any]) -> Any:
    return presence.bind(container, f)


@typeclass
def fold(container: Any, default_or_fn: Any, fn: Any = UNSET) -> Any:
    """Unwrap a container: f(value) when it holds one, otherwise the default."""


@fold.instance(Success)
@fold.instance(Failure)
def _fold_outcome(container: Any, default_or_fn: Any, fn: Any = UNSET) -> Any:
    return outcome.fold(container, default_or_fn, fn)


@fold.instance(Present)
@fold.instance(AbsentType)
def _fold_presence(container: Any, default_or_fn: Any, fn: Any = UNSET) -> Any:
    return presence.fold(container, default_or_fn, fn)


@typeclass
def on_value(container: Any, f: Callable[[Any], Any]) -> Any:
    """Call f(value) when the container holds a value; return the container."""


@on_value.instance(Success)
@on_value.instance(Failure)
def _on_value_outcome(container: Any, f: Callable[[Any], Any]) -> Any:
    return outcome.on_success(container, f)


@on_value.instance(Present)
@on_value.instance(AbsentType)
def _on_value_presence(container: Any, f: Callable[[Any], Any]) -> Any:
    return presence.on_present(container, f)


@typeclass
def on_empty(container: Any, f: Callable[..., Any]) -> Any:
    """Call f on the empty variant: f(reason) for Failure, f() for Absent. Return the container."""


@on_empty.instance(Success)
@on_empty.instance(Failure)
def _on_empty_outcome(container: Any, f: Callable[[Any], Any]) -> Any:
    return outcome.on_failure(container, f)


@on_empty.instance(Present)
@on_empty.instance(AbsentType)
def _on_empty_presence(container: Any, f: Callable[[], Any]) -> Any:
    return presence.on_absent(container, f)
