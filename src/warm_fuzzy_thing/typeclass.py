"""@typeclass decorator and dispatch mechanism.

Provides Haskell-style typeclasses with runtime dispatch on the type of the
first argument. The container-generic operations in ``warm_fuzzy_thing.monad``
are built on it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

from warm_fuzzy_thing.errors import NoInstanceError

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A typeclass with registered type instances.

    The decorated function supplies the name, signature and docstring. If it
    also has a real body, that body is the fallback for types without an
    instance; a stub (docstring, ``...`` or ``pass`` only) has no fallback.

    Attributes:
        _self_name: The name of the typeclass function.
        _self_default: The fallback implementation, or None for a stub.
        _self_instances: Dictionary mapping types to their instance implementations.

    Example:
        ```python
        @typeclass
        def describe(container) -> str:
            '''Describe a container.'''

        @describe.instance(Success)
        def _describe_success(container: Success) -> str:
            return f'ok: {container.value}'

        describe(Success(1))
        # 'ok: 1'
        ```
    """

    def __init__(self, default_fn: F) -> None:
        """Initialize a typeclass from its signature function."""
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default: F | None = default_fn if _has_implementation(default_fn) else None
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, type_: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an instance implementation for a specific type.

        The returned decorator gives back the function unchanged, so several
        registrations can be stacked on one implementation.
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self._self_instances[type_] = fn
            return fn

        return decorator

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        """Find the best matching instance for a value: exact type first, then the MRO."""
        value_type = type(value)

        if value_type in self._self_instances:
            return self._self_instances[value_type]

        for base in value_type.__mro__[1:]:
            if base in self._self_instances:
                return self._self_instances[base]

        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the appropriate instance based on first argument."""
        if not args:
            if self._self_default is not None:
                return self._self_default(**kwargs)
            raise TypeError(f'{self._self_name}() requires at least one argument')

        first_arg = args[0]
        instance_fn = self._find_instance(first_arg)

        if instance_fn is not None:
            return instance_fn(*args, **kwargs)

        if self._self_default is not None:
            return self._self_default(*args, **kwargs)

        raise NoInstanceError(self._self_name, type(first_arg))

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def _stub(*args: Any, **kwargs: Any) -> Any: ...


def _documented_stub(*args: Any, **kwargs: Any) -> Any:
    """Stub."""


# Empty-body bytecode as compiled by the running interpreter.
_STUB_CODES = frozenset(fn.__code__.co_code for fn in (_stub, _documented_stub))


def _has_implementation(fn: Callable[..., Any]) -> bool:
    """Check if a function has an actual implementation (not just a docstring, ``...`` or ``pass``)."""
    code = getattr(fn, '__code__', None)
    if code is None:
        return True  # Built-in or C extension, assume it has implementation

    if code.co_code not in _STUB_CODES:
        return True

    # Same bytecode as a stub can still return a constant other than None.
    doc = getattr(fn, '__doc__', None)
    return any(const is not None and const is not Ellipsis and const != doc for const in code.co_consts)


def typeclass(fn: F) -> TypeClass[F]:
    """Decorator to create a typeclass from a function signature.

    The decorated function serves as the default implementation (if it has a body)
    or just defines the signature (if the body is a docstring or `...`).

    Args:
        fn: The function defining the typeclass signature.

    Returns:
        A TypeClass instance that dispatches to registered instances.

    Example:
        ```python
        @typeclass
        def label(container) -> str:
            return 'unknown'

        @label.instance(Success)
        def _label_success(container: Success) -> str:
            return 'ok'

        label(Success(1)), label(1.5)
        # ('ok', 'unknown')
        ```
    """
    return TypeClass(fn)
