"""Tests for typeclass decorator and dispatch."""

import pytest
from warm_fuzzy_thing import Absent, AbsentType, Failure, Present, Success
from warm_fuzzy_thing.typeclass import NoInstanceError, TypeClass, typeclass


class TestTypeclassBasic:
    """Tests for basic typeclass functionality."""

    def test_typeclass_decorator(self):
        """@typeclass creates a TypeClass instance."""

        @typeclass
        def show(value) -> str: ...

        assert isinstance(show, TypeClass)

    def test_typeclass_preserves_name(self):
        @typeclass
        def my_func(value) -> str: ...

        assert my_func.__name__ == 'my_func'

    def test_typeclass_preserves_doc(self):
        @typeclass
        def show(value) -> str:
            """Convert to string."""

        assert show.__doc__ == 'Convert to string.'

    def test_typeclass_repr(self):
        @typeclass
        def show(value) -> str: ...

        assert repr(show) == '<typeclass show with 0 instances>'


class TestTypeclassInstances:
    """Tests for registering and dispatching instances."""

    def test_dispatch_on_container_variant(self):
        @typeclass
        def describe(container) -> str:
            """Describe a container."""

        @describe.instance(Success)
        def _success(container) -> str:
            return f'success: {container.value}'

        @describe.instance(Failure)
        def _failure(container) -> str:
            return f'failure: {container.reason}'

        assert describe(Success(1)) == 'success: 1'
        assert describe(Failure('x')) == 'failure: x'

    def test_stacked_registration(self):
        @typeclass
        def kind(container) -> str: ...

        @kind.instance(Present)
        @kind.instance(AbsentType)
        def _presence(container) -> str:
            return 'presence'

        assert kind(Present(1)) == 'presence'
        assert kind(Absent) == 'presence'
        assert repr(kind) == '<typeclass kind with 2 instances>'

    def test_extra_arguments_are_forwarded(self):
        @typeclass
        def get_or(container, default): ...

        @get_or.instance(Success)
        def _success(container, default):
            return container.value

        @get_or.instance(Failure)
        def _failure(container, default):
            return default

        assert get_or(Failure('x'), default=0) == 0

    def test_mro_lookup(self):
        class Base:
            pass

        class Child(Base):
            pass

        @typeclass
        def name(value) -> str: ...

        @name.instance(Base)
        def _base(value) -> str:
            return 'base'

        assert name(Child()) == 'base'

    def test_exact_type_beats_base(self):
        @typeclass
        def name(value) -> str: ...

        @name.instance(object)
        def _object(value) -> str:
            return 'object'

        @name.instance(int)
        def _int(value) -> str:
            return 'int'

        assert name(1) == 'int'
        assert name('x') == 'object'


class TestTypeclassErrors:
    """Tests for dispatch failures."""

    def test_missing_instance_raises(self):
        @typeclass
        def show(value) -> str:
            """Convert to string."""

        with pytest.raises(NoInstanceError) as exc_info:
            show(1.5)
        assert exc_info.value.typeclass_name == 'show'
        assert exc_info.value.value_type is float

    def test_no_arguments_raises(self):
        @typeclass
        def show(value) -> str: ...

        with pytest.raises(TypeError, match='requires at least one argument'):
            show()
class TestTypeclassDefault:
    """Tests for the fallback body of a typeclass."""

    def test_default_body_used_without_instance(self):
        @typeclass
        def show(value) -> str:
            return 'default'

        assert show(1.5) == 'default'

    def test_instance_beats_default(self):
        @typeclass
        def show(value) -> str:
            return 'default'

        @show.instance(Success)
        def _success(value) -> str:
            return f'success: {value.value}'

        assert show(Success(1)) == 'success: 1'
        assert show(Absent) == 'default'

    def test_default_receives_all_arguments(self):
        @typeclass
        def get_or(container, default):
            return default

        assert get_or(Present(1), default=0) == 0
        assert get_or(Present(1), 'fallback') == 'fallback'

    def test_documented_default_body_is_used(self):
        @typeclass
        def size(value) -> int:
            """Size of a value."""
            return len(value)

        assert size([1, 2]) == 2
        assert size.__doc__ == 'Size of a value.'

    def test_default_called_without_arguments(self):
        @typeclass
        def origin() -> str:
            return 'origin'

        assert origin() == 'origin'

    def test_stub_bodies_have_no_default(self):
        def ellipsis_stub(value): ...

        def pass_stub(value):
            pass

        def doc_stub(value):
            """Doc."""

        def none_stub(value):
            return None

        for stub in (ellipsis_stub, pass_stub, doc_stub, none_stub):
            with pytest.raises(NoInstanceError):
                typeclass(stub)(1.5)
